"""
Customer Service — Pydantic Request/Response Schemas
======================================================

What:  Pydantic models defining the API contract with clients.
Why:   Automatic serialization and OpenAPI doc generation; camelCase on the
       wire while the Python side stays snake_case.
How:   FastAPI validates request bodies against these models and serializes
       responses by alias (firstName, lastName, photoPath).

Design Decision:
    CustomerPayload makes every field optional on purpose. Presence rules are
    checked by services.validation so that a missing firstName produces our
    structured 400 body instead of FastAPI's generic 422. Type errors (age="x")
    are still caught by Pydantic and mapped to the same 400 shape in main.py.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from customer_service.models.customer import Customer


class CamelModel(BaseModel):
    """Base for every wire model: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CustomerPayload(CamelModel):
    """
    What:  Body of POST /api/customers and PUT /api/customers/{id}.
    Why:   Only the four client-editable fields; `id` and `photoPath` sent by a
           client are ignored (Pydantic drops unknown keys).
    """

    first_name: Optional[str] = Field(default=None, description="Customer first name")
    last_name: Optional[str] = Field(default=None, description="Customer last name")
    age: Optional[int] = Field(default=None, description="Age in years")
    salary: Optional[float] = Field(default=None, description="Salary")

    def to_customer(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            age=self.age,
            salary=self.salary,
        )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CustomerResponse(CamelModel):
    """Full representation of a customer record."""

    id: str = Field(description="Server-generated customer identifier")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    age: Optional[int] = None
    salary: Optional[float] = None
    photo_path: Optional[str] = Field(
        default=None,
        description="Stored photo filename (null until a photo is uploaded)",
    )

    @classmethod
    def from_customer(cls, customer: Customer) -> "CustomerResponse":
        return cls.model_validate(customer.model_dump())


class CustomerCreatedResponse(BaseModel):
    """
    What:  Response of POST /api/customers (HTTP 201).
    Why:   Wraps the record with a human-readable message and server timestamp.
    """

    customer: CustomerResponse
    message: str = Field(default="Customer created successfully")
    timestamp: datetime


class ValidationErrorResponse(BaseModel):
    """
    What:  Structured 400 body for invalid customer payloads.

    Example:
        {
            "errors": ["The field firstName must not be empty",
                       "The field age must not be null"],
            "timestamp": "2024-01-15T12:00:00Z",
            "status": 400
        }
    """

    errors: List[str]
    timestamp: datetime
    status: int = 400


class ErrorResponse(BaseModel):
    """Generic error body for infrastructure failures (5xx)."""

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
