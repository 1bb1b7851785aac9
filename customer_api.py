"""Customer Manager API client.

This module defines a small client wrapper around the customer REST
API.  It uses the ``requests`` library internally and exposes one
method per endpoint:

* :meth:`CustomerAPI.list_customers` – return all customers.
* :meth:`CustomerAPI.get_customer` – fetch a single customer by id.
* :meth:`CustomerAPI.register_customer` – create a new customer.
* :meth:`CustomerAPI.update_customer` – partially update a customer.
* :meth:`CustomerAPI.delete_customer` – delete a customer.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``error`` is a dictionary with the keys
``status_code`` and ``message`` (the ``detail`` sent by the server,
e.g. ``"email address already exists"``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

CUSTOMER_PATH = "/api/v1/customer"


class CustomerAPI:
    """Client for the customer endpoints."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``.  On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or err_json.get("message") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Customer operations
    # ------------------------------------------------------------------
    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all customers.

        Returns:
            A tuple ``(customers, error)``.  ``customers`` is empty on
            failure.
        """
        data, error = self._request("GET", CUSTOMER_PATH)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_customer(self, customer_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Dict[str, Any]]]:
        return self._request("GET", f"{CUSTOMER_PATH}/{customer_id}")

    def register_customer(
        self, name: str, email: str, age: int, gender: Optional[str] = None
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Register a new customer.

        Returns:
            A tuple ``(success, error)``.
        """
        payload: Dict[str, Any] = {"name": name, "email": email, "age": age}
        if gender is not None:
            payload["gender"] = gender
        _, error = self._request("POST", CUSTOMER_PATH, json_body=payload)
        return error is None, error

    def update_customer(
        self,
        customer_id: int,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        age: Optional[int] = None,
    ) -> Tuple[bool, Optional[Dict[str, Any]]]:
        """Partially update a customer.

        Only the arguments that are not ``None`` are sent.

        Returns:
            A tuple ``(success, error)``.
        """
        payload = {
            key: value
            for key, value in (("name", name), ("email", email), ("age", age))
            if value is not None
        }
        _, error = self._request("PUT", f"{CUSTOMER_PATH}/{customer_id}", json_body=payload)
        return error is None, error

    def delete_customer(self, customer_id: int) -> Tuple[bool, Optional[Dict[str, Any]]]:
        _, error = self._request("DELETE", f"{CUSTOMER_PATH}/{customer_id}")
        return error is None, error
