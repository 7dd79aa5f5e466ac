"""
Customer Service — Abstract Customer Repository
=================================================

What:  Abstract base class defining the persistence contract for customers.
Why:   Routes and services depend on this interface only; the concrete store
       is chosen once at startup (MongoCustomerRepository) and can be replaced
       in tests through FastAPI's dependency overrides.
How:   Concrete implementations inherit from CustomerRepository and implement
       the four operations below.
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator, Optional

from customer_service.models.customer import Customer


class CustomerRepository(ABC):
    """
    Persistence operations over Customer records.

    Contract:
        - Absence is signalled with None, never with an exception
        - Store failures are raised as DatabaseError
        - save() is an upsert keyed on id; insert when id is None
    """

    @abstractmethod
    def find_all(self) -> AsyncIterator[Customer]:
        """
        Stream every stored customer.

        Returns an async iterator; ordering is whatever the store yields.
        Failures may surface mid-iteration as DatabaseError.
        """
        ...

    @abstractmethod
    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        """Return the customer with this id, or None if there is none."""
        ...

    @abstractmethod
    async def save(self, customer: Customer) -> Customer:
        """
        Insert (id is None) or replace (id set) a customer.

        Returns:
            The persisted record; on insert, a copy carrying the generated id.
        """
        ...

    @abstractmethod
    async def delete(self, customer: Customer) -> None:
        """
        Remove the customer with the record's id.

        Deleting a record that is already gone is a no-op.
        """
        ...
