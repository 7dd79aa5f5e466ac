"""
Customer Service — MongoDB Customer Repository
================================================

What:  CustomerRepository implementation backed by a Motor collection.
How:   Each operation maps to one driver call; PyMongo errors are wrapped in
       DatabaseError so the global handler can answer with a generic 500.

Query plan:
    find_all    → find({})                        full collection scan
    find_by_id  → find_one({"_id": key})          primary key lookup
    save        → insert_one(doc)                 when id is None
                  replace_one({"_id": key}, doc, upsert=True) otherwise
    delete      → delete_one({"_id": key})
"""

import logging
from typing import AsyncIterator, Optional

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from customer_service.database import get_customer_collection
from customer_service.exceptions import DatabaseError
from customer_service.models.customer import Customer
from customer_service.repositories.base import CustomerRepository

logger = logging.getLogger(__name__)


class MongoCustomerRepository(CustomerRepository):
    """Customer persistence in a single MongoDB collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self._collection = collection

    async def find_all(self) -> AsyncIterator[Customer]:
        try:
            async for document in self._collection.find({}):
                yield Customer.from_document(document)
        except PyMongoError as e:
            logger.error("Database error listing customers: %s", str(e))
            raise DatabaseError(
                message="Could not retrieve customers. Please try again.",
                context={"error_type": type(e).__name__},
            )

    async def find_by_id(self, customer_id: str) -> Optional[Customer]:
        try:
            document = await self._collection.find_one(
                {"_id": Customer.document_key(customer_id)}
            )
        except PyMongoError as e:
            logger.error("Database error fetching customer %s: %s", customer_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the customer. Please try again.",
                context={"customer_id": customer_id, "error_type": type(e).__name__},
            )
        if document is None:
            return None
        return Customer.from_document(document)

    async def save(self, customer: Customer) -> Customer:
        document = customer.to_document()
        try:
            if customer.id is None:
                result = await self._collection.insert_one(document)
                saved = customer.model_copy(update={"id": str(result.inserted_id)})
                logger.info("Customer inserted: %s", saved.id)
                return saved

            await self._collection.replace_one(
                {"_id": Customer.document_key(customer.id)},
                document,
                upsert=True,
            )
            logger.info("Customer updated: %s", customer.id)
            return customer
        except PyMongoError as e:
            logger.error("Database error saving customer %s: %s", customer.id, str(e))
            raise DatabaseError(
                message="Could not save the customer. Please try again.",
                context={"customer_id": customer.id, "error_type": type(e).__name__},
            )

    async def delete(self, customer: Customer) -> None:
        if customer.id is None:
            logger.debug("Delete skipped: customer was never persisted")
            return
        try:
            result = await self._collection.delete_one(
                {"_id": Customer.document_key(customer.id)}
            )
        except PyMongoError as e:
            logger.error("Database error deleting customer %s: %s", customer.id, str(e))
            raise DatabaseError(
                message="Could not delete the customer. Please try again.",
                context={"customer_id": customer.id, "error_type": type(e).__name__},
            )
        if result.deleted_count == 0:
            logger.debug("Delete of absent customer %s was a no-op", customer.id)
        else:
            logger.info("Customer deleted: %s", customer.id)


def get_customer_repository(
    collection: AsyncIOMotorCollection = Depends(get_customer_collection),
) -> CustomerRepository:
    """
    FastAPI dependency binding the Mongo implementation.

    Tests replace this with an in-memory repository via app.dependency_overrides.
    """
    return MongoCustomerRepository(collection)
