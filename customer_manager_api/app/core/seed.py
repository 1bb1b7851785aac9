"""
Random sample customers.

Used to put a few rows into an empty database, either on startup
(``SEED_ON_STARTUP``) or from the ``seed_customers.py`` script.
Names come from Faker; customers are registered through
``CustomerService`` so the email uniqueness rule applies to them as
well.
"""

import logging
from typing import Optional

from faker import Faker

from customer_manager_api.app.core.exceptions import DuplicateResourceError
from customer_manager_api.app.schemas.customer import CustomerRegistrationRequest, Gender
from customer_manager_api.app.services.customer_service import CustomerService

logger = logging.getLogger(__name__)

# Sample ages are drawn from [SEED_MIN_AGE, SEED_MAX_AGE).
SEED_MIN_AGE = 16
SEED_MAX_AGE = 99


def random_registration(fake: Optional[Faker] = None) -> CustomerRegistrationRequest:
    """Build a registration request with a random name, email and age.

    The email is derived from the name (``first.last@gmail.com``) and
    the gender alternates with the parity of the age.  Pass a Faker
    seeded with ``seed_instance`` for reproducible output.
    """
    fake = fake or Faker()
    first_name = fake.first_name()
    last_name = fake.last_name()
    age = fake.random_int(min=SEED_MIN_AGE, max=SEED_MAX_AGE - 1)
    return CustomerRegistrationRequest(
        name=f"{first_name} {last_name}",
        email=f"{first_name}.{last_name}@gmail.com".lower(),
        age=age,
        gender=Gender.MALE if age % 2 == 0 else Gender.FEMALE,
    )


def seed_customers(
    service: CustomerService, count: int = 1, fake: Optional[Faker] = None
) -> int:
    """Register ``count`` random customers and return how many were stored.

    Random names can collide with existing email addresses; such
    customers are skipped.
    """
    fake = fake or Faker()
    created = 0
    for _ in range(count):
        request = random_registration(fake)
        try:
            service.add_customer(request)
        except DuplicateResourceError:
            logger.debug("Skipping sample customer %s, email already taken", request.email)
            continue
        created += 1
    logger.info("Seeded %s of %s sample customers", created, count)
    return created
