"""
Customer Service — Application Package
========================================

Architecture Note:
    The service follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services                    │  ← Pass-through, validation, photos
    ├─────────────────────────────────────┤
    │         Repositories                │  ← CustomerRepository + Mongo impl
    ├─────────────────────────────────────┤
    │      Models & Schemas (Data)        │  ← Stored document + API contract
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
