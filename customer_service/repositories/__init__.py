# Repositories package init
"""
Customer Service — Persistence Layer
======================================

What:  Storage access for Customer records behind an abstract interface.

Inventory:
    - CustomerRepository (abstract): find_all / find_by_id / save / delete
    - MongoCustomerRepository: Concrete implementation on a Motor collection
"""
