"""
Customer Service — Customer Field Validation
==============================================

What:  Explicit field-presence checks run before a customer is created.
How:   validate_customer() returns one FieldError per invalid field, in field
       order; require_valid_customer() raises CustomerValidationError when the
       list is not empty.

Rules:
    firstName, lastName  → must not be None or ""
    age, salary          → must not be None
"""

from typing import List

from customer_service.exceptions import CustomerValidationError, FieldError
from customer_service.models.customer import Customer

NOT_EMPTY = "must not be empty"
NOT_NULL = "must not be null"

# (attribute, API field name)
_REQUIRED_TEXT = (("first_name", "firstName"), ("last_name", "lastName"))
_REQUIRED_VALUES = (("age", "age"), ("salary", "salary"))


def validate_customer(customer: Customer) -> List[FieldError]:
    errors: List[FieldError] = []
    for attr, field in _REQUIRED_TEXT:
        if not getattr(customer, attr):
            errors.append(FieldError(field, NOT_EMPTY))
    for attr, field in _REQUIRED_VALUES:
        if getattr(customer, attr) is None:
            errors.append(FieldError(field, NOT_NULL))
    return errors


def require_valid_customer(customer: Customer) -> None:
    errors = validate_customer(customer)
    if errors:
        raise CustomerValidationError(errors)
