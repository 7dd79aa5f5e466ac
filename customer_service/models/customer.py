"""
Customer Service — Customer Document Model
============================================

What:  The Customer entity and its mapping to MongoDB documents.
Why:   Keeps the stored shape (snake_case fields, `_id` ObjectId) separate from
       the API contract (camelCase JSON, string id) defined in schemas/.
Who:   Used by the repository for persistence and by routes for mutation.

Stored document layout (collection `customers`):
    {
        "_id": ObjectId("65a4..."),
        "first_name": "Ana",
        "last_name": "Silva",
        "age": 30,
        "salary": 5000.0,
        "photo_path": "0b6f...-portrait.jpg"   # absent until a photo is uploaded
    }

Field presence rules (non-empty names, non-null age/salary) are not enforced
here: an existing record may be overwritten with whatever an update carries.
They are checked explicitly on create by services.validation.
"""

from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel


class Customer(BaseModel):
    """
    A single customer record.

    Lifecycle:
        1. Built from a create payload with id=None
        2. Repository.save() inserts it and returns a copy with the generated id
        3. Update / photo upload replace fields on the loaded record and save again
        4. Repository.delete() removes it by id
    """

    id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    salary: Optional[float] = None
    photo_path: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Stored representation, without the identifier."""
        return self.model_dump(exclude={"id"}, exclude_none=True)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "Customer":
        data = {k: v for k, v in document.items() if k != "_id"}
        return cls(id=str(document["_id"]), **data)

    @staticmethod
    def document_key(customer_id: str) -> Any:
        """
        Translate an API id into the `_id` value stored in Mongo.

        Ids generated by this service are ObjectIds; anything else is looked up
        as a plain string so a malformed id simply matches nothing.
        """
        if ObjectId.is_valid(customer_id):
            return ObjectId(customer_id)
        return customer_id

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, first_name='{self.first_name}')>"
