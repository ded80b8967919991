from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

import pytest

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


@dataclass
class User:
    name: str | None = "Alice"
    age: int | None = 30
    email: str | None = "alice@example.com"
    password: str | None = "S3cure!pass"
    confirm_password: str | None = "S3cure!pass"


@pytest.fixture()
def user() -> User:
    return User()


@pytest.fixture()
def user_type() -> type[User]:
    return User


@pytest.fixture()
def clock():
    return lambda: FIXED_NOW
