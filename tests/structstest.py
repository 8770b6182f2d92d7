"""
Shared test models for all test files.

Plain dataclasses are used as decodeN constructors, pydantic models for the
model() interop tests.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel

# =============================================================================
# Constructor targets
# =============================================================================


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Contact:
    system: str
    value: str


@dataclass(frozen=True)
class Patient:
    id: str
    active: bool
    contacts: list
    age: Optional[int] = None


# =============================================================================
# Pydantic models
# =============================================================================


class Address(BaseModel):
    """Sample nested model."""

    city: str
    zip_code: str


class User(BaseModel):
    """Sample model with nested and optional fields."""

    name: str
    age: int
    address: Address
    email: Optional[str] = None


# =============================================================================
# Sample payloads
# =============================================================================


def patient_payload() -> dict:
    return {
        "id": "abc123",
        "active": True,
        "age": 42,
        "contacts": [
            {"system": "phone", "value": "555-1234"},
            {"system": "email", "value": "john@example.com"},
        ],
    }
