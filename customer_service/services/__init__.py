# Services package init
"""
Customer Service — Services Layer
===================================

What:  Logic sitting between routes (HTTP) and the repository (persistence).

Service Inventory:
    - CustomerService: Pass-through over the customer repository
    - PhotoStorage: Photo filename generation and storage
    - validation: Field-presence checks for new customers

Why services are separate from routes:
    1. Testability: Services can be unit-tested without HTTP overhead
    2. Replaceability: Routes depend on the repository interface, not on Mongo
"""
