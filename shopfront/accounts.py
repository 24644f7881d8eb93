"""Registered shoppers kept in a comma-separated text file, with login and payment checks."""

from __future__ import annotations

import os
from dataclasses import astuple, dataclass
from enum import Enum
from pathlib import Path

_FIELD_COUNT = 5


class DuplicateUserError(ValueError):
    """Raised when registering a name that is already taken."""


class AuthenticationError(Exception):
    """Raised when a name and password do not match a registered user."""


class PaymentMethod(Enum):
    """How an order is paid for."""

    ONLINE = "Online Payment"
    ON_DELIVERY = "Pay On Delivery"


@dataclass(frozen=True)
class UserRecord:
    """One registered shopper: full name, password, street address, e-mail and phone."""

    name: str
    password: str
    address: str = ""
    email: str = ""
    phone: str = ""

    def to_line(self) -> str:
        """Serialise as one line of the user file, without the newline."""
        fields = astuple(self)
        for value in fields:
            if "," in value or "\n" in value or "\r" in value:
                raise ValueError(f"field may not contain commas or line breaks: {value!r}")
        return ",".join(fields)

    @staticmethod
    def from_line(line: str) -> UserRecord:
        """Parse one line of the user file."""
        fields = line.rstrip("\r\n").split(",")
        if len(fields) != _FIELD_COUNT:
            raise ValueError(
                f"expected {_FIELD_COUNT} comma-separated fields, got {len(fields)}: {line!r}"
            )
        return UserRecord(*fields)


class UserStore:
    """The file of registered users, one record per line."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def records(self) -> list[UserRecord]:
        """All well-formed records in file order; a missing file holds none."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        result = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                result.append(UserRecord.from_line(line))
            except ValueError:
                continue
        return result

    def find(self, name: str) -> UserRecord | None:
        """The first record with this name, or None."""
        return next((r for r in self.records() if r.name == name), None)

    def register(self, record: UserRecord) -> None:
        """Append a new user; the name must be non-empty and not already taken."""
        if not record.name:
            raise ValueError("a user name is required")
        if self.find(record.name) is not None:
            raise DuplicateUserError(f"username already taken: {record.name!r}")
        line = record.to_line()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        existing = self.path.read_text(encoding="utf-8") if self.path.exists() else ""
        with self.path.open("a", encoding="utf-8") as handle:
            if existing and not existing.endswith("\n"):
                handle.write("\n")
            handle.write(line + "\n")

    def authenticate(self, name: str, password: str) -> UserRecord:
        """Return the record matching both name and password."""
        for record in self.records():
            if record.name == name and record.password == password:
                return record
        raise AuthenticationError("invalid username or password")

    def verify_payment(self, name: str, username: str, password: str) -> bool:
        """Check the credentials entered at the payment gateway against the shopper's own."""
        if not username or not password:
            raise ValueError("both username and password are required")
        record = self.find(name)
        if record is None:
            return False
        return record.name == username and record.password == password