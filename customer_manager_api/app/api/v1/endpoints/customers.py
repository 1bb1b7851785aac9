"""
Customer endpoints for API v1.

Five routes map one to one onto ``CustomerService``: list, get by id,
register, update and delete.  Business-rule failures raised by the
service are turned into 404/400 responses by the handlers registered
in ``core.exceptions``.

Handlers are plain functions because the service and the SQLite
driver are synchronous; FastAPI runs them in its threadpool.
"""

from typing import List

from fastapi import APIRouter, Depends

from customer_manager_api.app.repositories.customer_dao import CustomerSQLiteDataAccessService
from customer_manager_api.app.schemas.customer import (
    CustomerRead,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)
from customer_manager_api.app.services.customer_service import CustomerService

router = APIRouter()


def get_customer_service() -> CustomerService:
    """Build the service backed by the configured SQLite database."""
    return CustomerService(CustomerSQLiteDataAccessService())


@router.get("", response_model=List[CustomerRead])
def get_customers(service: CustomerService = Depends(get_customer_service)) -> List[CustomerRead]:
    """Return all customers."""
    return service.get_all_customers()


@router.get("/{customer_id}", response_model=CustomerRead)
def get_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
) -> CustomerRead:
    """Return a single customer, or 404 if it does not exist."""
    return service.get_customer(customer_id)


@router.post("")
def register_customer(
    request: CustomerRegistrationRequest,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Register a new customer.  Returns 400 if the email is taken."""
    service.add_customer(request)


@router.delete("/{customer_id}")
def delete_customer(
    customer_id: int, service: CustomerService = Depends(get_customer_service)
) -> None:
    """Delete a customer, or 404 if it does not exist."""
    service.delete_customer_by_id(customer_id)


@router.put("/{customer_id}")
def update_customer(
    customer_id: int,
    request: CustomerUpdateRequest,
    service: CustomerService = Depends(get_customer_service),
) -> None:
    """Partially update a customer.

    404 if the customer does not exist; 400 if the new email is taken
    or if nothing would change.
    """
    service.update_customer(customer_id, request)
