"""
Customer Service — Customer Route Handlers
============================================

What:  The REST surface for customers: list, get, create, update, delete and
       the two photo upload endpoints.
How:   Each handler resolves the record through CustomerService, mutates it
       where needed, and maps the outcome to a status code.
Who:   Any HTTP client of the customer API.

Not-found Handling:
    A missing customer is not an error here. Handlers return a bare 404
    response (no body, no content type) instead of raising, so it never
    reaches the global exception handlers.

Ordering Guarantees:
    - Lookup completes before any mutation of the looked-up record
    - Photo bytes are written before the record is saved; if the write fails
      the record is not saved, and if the save fails the photo is removed
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile

from customer_service.models.customer import Customer
from customer_service.schemas.customer import (
    CustomerCreatedResponse,
    CustomerPayload,
    CustomerResponse,
    ErrorResponse,
    ValidationErrorResponse,
)
from customer_service.services.customer_service import (
    CustomerService,
    get_customer_service,
)
from customer_service.services.photo_storage import PhotoStorage, get_photo_storage
from customer_service.services.validation import require_valid_customer

logger = logging.getLogger(__name__)

CUSTOMERS_PATH = "/api/customers"

router = APIRouter(prefix=CUSTOMERS_PATH, tags=["Customers"])

_NOT_FOUND = {404: {"description": "Customer not found (empty body)"}}
_SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}


def _location(customer: Customer) -> str:
    return f"{CUSTOMERS_PATH}/{customer.id}"


async def _store_photo_and_save(
    service: CustomerService,
    storage: PhotoStorage,
    customer: Customer,
    file: UploadFile,
) -> Customer:
    """
    Write the uploaded photo, point the customer at it, then persist.

    Raises FileStorageError before anything is saved if the write fails.
    """
    try:
        content = await file.read()
        filename = await storage.store(file.filename or "photo", content)
    finally:
        await file.close()

    customer.photo_path = filename
    try:
        return await service.save(customer)
    except Exception:
        await storage.remove(filename)
        raise


@router.get(
    "",
    response_model=List[CustomerResponse],
    responses=_SERVER_ERROR,
    summary="List all customers",
)
async def list_customers(
    service: CustomerService = Depends(get_customer_service),
) -> List[CustomerResponse]:
    """
    Return every stored customer.

    The store's stream is fully collected before the response starts, so a
    failure part-way through yields a 500 rather than a truncated array.
    """
    return [CustomerResponse.from_customer(c) async for c in service.find_all()]


@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a customer by ID",
)
async def get_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
):
    customer = await service.find_by_id(customer_id)
    if customer is None:
        return Response(status_code=404)
    return CustomerResponse.from_customer(customer)


@router.post(
    "",
    status_code=201,
    response_model=CustomerCreatedResponse,
    responses={
        400: {"description": "Invalid customer fields", "model": ValidationErrorResponse},
        **_SERVER_ERROR,
    },
    summary="Create a customer",
)
async def create_customer(
    payload: CustomerPayload,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
) -> CustomerCreatedResponse:
    """
    Validate and persist a new customer.

    Validation errors are raised as CustomerValidationError and rendered by
    the global handler as {errors, timestamp, status}.
    """
    customer = payload.to_customer()
    require_valid_customer(customer)

    saved = await service.save(customer)
    response.headers["Location"] = _location(saved)
    return CustomerCreatedResponse(
        customer=CustomerResponse.from_customer(saved),
        message="Customer created successfully",
        timestamp=datetime.now(timezone.utc),
    )


@router.put(
    "/{customer_id}",
    status_code=201,
    response_model=CustomerResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a customer",
    description=(
        "Overwrites firstName, lastName, age and salary. The id and photoPath are "
        "never changed. Answers 201 Created rather than 200 for historical reasons."
    ),
)
async def update_customer(
    customer_id: str,
    payload: CustomerPayload,
    response: Response,
    service: CustomerService = Depends(get_customer_service),
):
    customer = await service.find_by_id(customer_id)
    if customer is None:
        return Response(status_code=404)

    customer.first_name = payload.first_name
    customer.last_name = payload.last_name
    customer.age = payload.age
    customer.salary = payload.salary

    saved = await service.save(customer)
    response.headers["Location"] = _location(saved)
    return CustomerResponse.from_customer(saved)


@router.delete(
    "/{customer_id}",
    status_code=204,
    responses=_NOT_FOUND,
    summary="Delete a customer",
)
async def delete_customer(
    customer_id: str,
    service: CustomerService = Depends(get_customer_service),
) -> Response:
    customer = await service.find_by_id(customer_id)
    if customer is None:
        return Response(status_code=404)

    await service.delete(customer)
    return Response(status_code=204)


@router.post(
    "/with-photo",
    status_code=201,
    response_model=CustomerResponse,
    responses=_SERVER_ERROR,
    summary="Create a customer together with a photo",
)
async def create_customer_with_photo(
    response: Response,
    file: UploadFile = File(..., description="Customer photo"),
    first_name: Optional[str] = Form(default=None, alias="firstName"),
    last_name: Optional[str] = Form(default=None, alias="lastName"),
    age: Optional[int] = Form(default=None),
    salary: Optional[float] = Form(default=None),
    service: CustomerService = Depends(get_customer_service),
    storage: PhotoStorage = Depends(get_photo_storage),
) -> CustomerResponse:
    """
    Multipart create: record fields as form fields plus a `file` part.

    The photo is written first; the customer is only saved once the file is
    on disk.

    Unlike POST /api/customers, no field validation runs here: missing form
    fields are saved as null. This endpoint has no 400 for invalid fields.
    """
    customer = Customer(
        first_name=first_name,
        last_name=last_name,
        age=age,
        salary=salary,
    )
    logger.info("Creating customer with photo: filename=%s", file.filename or "unknown")

    saved = await _store_photo_and_save(service, storage, customer, file)
    response.headers["Location"] = _location(saved)
    return CustomerResponse.from_customer(saved)


@router.post(
    "/{customer_id}/photo",
    response_model=CustomerResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Upload a photo for an existing customer",
)
async def upload_customer_photo(
    customer_id: str,
    file: UploadFile = File(..., description="Customer photo"),
    service: CustomerService = Depends(get_customer_service),
    storage: PhotoStorage = Depends(get_photo_storage),
):
    customer = await service.find_by_id(customer_id)
    if customer is None:
        await file.close()
        return Response(status_code=404)

    saved = await _store_photo_and_save(service, storage, customer, file)
    return CustomerResponse.from_customer(saved)
