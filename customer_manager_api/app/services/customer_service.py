"""
Business logic for customers.

``CustomerService`` enforces the rules the storage layer does not:
email addresses are unique, a customer must exist before it is
updated or deleted, and an update must change at least one stored
value.  Violations raise the exceptions from ``core.exceptions``;
storage errors propagate unchanged.
"""

import logging
from typing import List

from customer_manager_api.app.core.exceptions import (
    DUPLICATE_EMAIL_MESSAGE,
    DuplicateResourceError,
    NoDataChangeError,
    ResourceNotFoundError,
)
from customer_manager_api.app.repositories.customer_dao import CustomerDAO
from customer_manager_api.app.schemas.customer import (
    CustomerCreate,
    CustomerRead,
    CustomerRegistrationRequest,
    CustomerUpdateRequest,
)

logger = logging.getLogger(__name__)


def _not_found(customer_id: int) -> ResourceNotFoundError:
    return ResourceNotFoundError(f"customer with [{customer_id}] not found")


class CustomerService:
    """Service for registering, reading, updating and deleting customers."""

    def __init__(self, customer_dao: CustomerDAO) -> None:
        self.customer_dao = customer_dao

    def get_all_customers(self) -> List[CustomerRead]:
        return self.customer_dao.select_all_customers()

    def get_customer(self, customer_id: int) -> CustomerRead:
        customer = self.customer_dao.select_customer_by_id(customer_id)
        if customer is None:
            raise _not_found(customer_id)
        return customer

    def add_customer(self, request: CustomerRegistrationRequest) -> None:
        """Register a new customer.

        Raises ``DuplicateResourceError`` when the email address is
        already in use; nothing is written in that case.
        """
        if self.customer_dao.exists_customer_with_email(request.email):
            logger.warning("Registration rejected, email address already exists")
            logger.debug("Rejected registration email: %s", request.email)
            raise DuplicateResourceError(DUPLICATE_EMAIL_MESSAGE)

        customer = CustomerCreate(
            name=request.name,
            email=request.email,
            age=request.age,
            gender=request.gender,
        )
        self.customer_dao.insert_customer(customer)
        logger.info("Registered new customer")
        logger.debug("Registered customer email: %s", request.email)

    def delete_customer_by_id(self, customer_id: int) -> None:
        if not self.customer_dao.exists_customer_with_id(customer_id):
            raise _not_found(customer_id)

        self.customer_dao.delete_customer_by_id(customer_id)
        logger.info("Deleted customer %s", customer_id)

    def update_customer(self, customer_id: int, request: CustomerUpdateRequest) -> None:
        """Apply a partial update to an existing customer.

        Only fields that were sent with a non-null value different from
        the stored one are written.  If no field qualifies the update is
        rejected with ``NoDataChangeError`` rather than accepted as a
        no-op.  A new email address is checked for uniqueness before
        anything is written.
        """
        customer = self.get_customer(customer_id)
        provided = request.provided_fields()

        changes = {
            field: value
            for field, value in provided.items()
            if value != getattr(customer, field)
        }

        if "email" in changes and self.customer_dao.exists_customer_with_email(changes["email"]):
            logger.warning("Update of customer %s rejected, email address already exists", customer_id)
            raise DuplicateResourceError(DUPLICATE_EMAIL_MESSAGE)

        if not changes:
            raise NoDataChangeError("no data changes found")

        self.customer_dao.update_customer(customer_id, changes)
        logger.info("Updated customer %s fields %s", customer_id, sorted(changes))
