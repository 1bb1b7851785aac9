"""Tests for random sample customers and the seeding script."""

from unittest.mock import MagicMock

import pytest
from faker import Faker

import seed_customers as seed_script
from customer_manager_api.app.core.exceptions import DuplicateResourceError
from customer_manager_api.app.core.seed import (
    SEED_MAX_AGE,
    SEED_MIN_AGE,
    random_registration,
    seed_customers,
)
from customer_manager_api.app.repositories.customer_dao import CustomerSQLiteDataAccessService
from customer_manager_api.app.schemas.customer import Gender
from customer_manager_api.app.services.customer_service import CustomerService


def _seeded_faker(seed: int) -> Faker:
    fake = Faker()
    fake.seed_instance(seed)
    return fake


@pytest.fixture
def fake() -> Faker:
    return _seeded_faker(42)


def test_random_registration_shape(fake):
    for _ in range(50):
        request = random_registration(fake)
        first_name = request.name.split(" ")[0]
        assert request.email.startswith(f"{first_name}.".lower())
        assert request.email.endswith("@gmail.com")
        assert SEED_MIN_AGE <= request.age < SEED_MAX_AGE
        expected = Gender.MALE if request.age % 2 == 0 else Gender.FEMALE
        assert request.gender == expected


def test_seeded_faker_is_reproducible():
    first_fake, second_fake = _seeded_faker(7), _seeded_faker(7)

    first = [random_registration(first_fake) for _ in range(3)]
    second = [random_registration(second_fake) for _ in range(3)]

    assert first == second


def test_seed_skips_duplicates(fake):
    service = MagicMock(spec=CustomerService)
    service.add_customer.side_effect = [None, DuplicateResourceError("email address already exists"), None]

    created = seed_customers(service, count=3, fake=fake)

    assert created == 2
    assert service.add_customer.call_count == 3


def test_seed_stores_unique_customers(customer_service, customer_dao, fake):
    created = seed_customers(customer_service, count=20, fake=fake)

    customers = customer_dao.select_all_customers()
    assert len(customers) == created
    assert len({c.email for c in customers}) == created


def test_seed_script(tmp_path, capsys):
    db_file = str(tmp_path / "seeded.db")

    assert seed_script.main(["--db", db_file, "--count", "3"]) == 0

    stored = CustomerSQLiteDataAccessService(db_file).select_all_customers()
    assert 1 <= len(stored) <= 3
    assert "Created" in capsys.readouterr().out


def test_seed_script_rejects_bad_count(tmp_path):
    assert seed_script.main(["--db", str(tmp_path / "x.db"), "--count", "0"]) == 1
