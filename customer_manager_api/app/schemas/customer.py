"""
Pydantic models for customer data.

``CustomerRegistrationRequest`` and ``CustomerUpdateRequest`` are the
request bodies accepted by the API.  ``CustomerCreate`` is the record
handed to the data-access layer on insert (it has no ``id`` yet) and
``CustomerRead`` is what the API returns.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

MAX_AGE = 150


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, examples=["Alex"])
    email: str = Field(..., min_length=1, examples=["alex@gmail.com"])
    age: int = Field(..., ge=0, le=MAX_AGE, examples=[19])
    gender: Optional[Gender] = Field(None, examples=["MALE"])


class CustomerRegistrationRequest(CustomerBase):
    """Schema for registering a customer."""


class CustomerCreate(CustomerBase):
    """A customer that has not been stored yet."""


class CustomerUpdateRequest(BaseModel):
    """Schema for a partial update.

    All fields are optional.  A field that is omitted or sent as
    ``null`` is left untouched.
    """

    name: Optional[str] = Field(None, min_length=1, examples=["Alex"])
    email: Optional[str] = Field(None, min_length=1, examples=["alex@gmail.com"])
    age: Optional[int] = Field(None, ge=0, le=MAX_AGE, examples=[20])

    def provided_fields(self) -> dict:
        """Return the fields the client actually sent with a non-null value."""
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }


class CustomerRead(CustomerBase):
    """Schema for reading a customer from the API."""

    id: int

    model_config = {
        "from_attributes": True,
        "frozen": True,
    }
