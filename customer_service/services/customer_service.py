"""
Customer Service — Customer Service Layer
===========================================

What:  Thin business layer between routes and the customer repository.
Why:   Gives routes a single indirection point, so HTTP handlers never
       touch the store directly and can be tested against any repository.
How:   Every operation forwards to the repository unchanged.
"""

from typing import AsyncIterator, Optional

from fastapi import Depends

from customer_service.models.customer import Customer
from customer_service.repositories.base import CustomerRepository
from customer_service.repositories.mongo import get_customer_repository


class CustomerService:
    """Pass-through over a CustomerRepository."""

    def __init__(self, repository: CustomerRepository):
        self.repository = repository

    def find_all(self) -> AsyncIterator[Customer]:
        return self.repository.find_all()

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        return await self.repository.find_by_id(customer_id)

    async def save(self, customer: Customer) -> Customer:
        return await self.repository.save(customer)

    async def delete(self, customer: Customer) -> None:
        await self.repository.delete(customer)


def get_customer_service(
    repository: CustomerRepository = Depends(get_customer_repository),
) -> CustomerService:
    return CustomerService(repository)
