"""
Tests for the requests-based CustomerAPI client.

The HTTP session is mocked; responses are real ``requests.Response``
objects so ``raise_for_status`` behaves as it does against a server.
"""

import json
from unittest.mock import MagicMock

import pytest
import requests

from customer_api import CUSTOMER_PATH, CustomerAPI


def _response(status_code: int, body=None) -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def api(session) -> CustomerAPI:
    return CustomerAPI(base_url="http://testserver/", session=session)


def test_list_customers(api, session):
    customers = [{"id": 1, "name": "Alex", "email": "alex@x.com", "age": 19, "gender": None}]
    session.request.return_value = _response(200, customers)

    data, error = api.list_customers()

    assert error is None
    assert data == customers
    session.request.assert_called_once_with(
        method="GET", url=f"http://testserver{CUSTOMER_PATH}", json=None, timeout=15
    )


def test_get_customer_not_found(api, session):
    session.request.return_value = _response(404, {"detail": "customer with [7] not found"})

    data, error = api.get_customer(7)

    assert data is None
    assert error == {"status_code": 404, "message": "customer with [7] not found"}


def test_register_customer(api, session):
    session.request.return_value = _response(200, None)

    ok, error = api.register_customer("Alex", "alex@x.com", 19, gender="MALE")

    assert ok is True
    assert error is None
    assert session.request.call_args.kwargs["json"] == {
        "name": "Alex",
        "email": "alex@x.com",
        "age": 19,
        "gender": "MALE",
    }


def test_register_duplicate_email(api, session):
    session.request.return_value = _response(400, {"detail": "email address already exists"})

    ok, error = api.register_customer("Alex", "alex@x.com", 19)

    assert ok is False
    assert error["message"] == "email address already exists"


def test_update_sends_only_given_fields(api, session):
    session.request.return_value = _response(200, None)

    ok, _ = api.update_customer(3, age=20)

    assert ok is True
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "PUT"
    assert kwargs["url"] == f"http://testserver{CUSTOMER_PATH}/3"
    assert kwargs["json"] == {"age": 20}


def test_delete_customer(api, session):
    session.request.return_value = _response(200, None)

    ok, error = api.delete_customer(3)

    assert ok is True
    assert session.request.call_args.kwargs["method"] == "DELETE"


def test_connection_error(api, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    customers, error = api.list_customers()

    assert customers == []
    assert error == {"status_code": None, "message": "connection refused"}
