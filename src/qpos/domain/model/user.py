"""Users and the resolved principal handed to the core.

Authentication happens outside qpos.  The role is an explicit field on
the user record, resolved once when the principal is built.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from qpos.domain.exceptions import InvalidInput


class Role(Enum):
    ADMIN = "admin"
    CASHIER = "cashier"
    KITCHEN = "kitchen"

    @staticmethod
    def parse(value: str) -> Role:
        try:
            return Role(value.strip().lower())
        except ValueError as exc:
            raise InvalidInput(f"Unknown role {value!r}") from exc


@dataclass(frozen=True)
class User:
    id: str
    name: str
    email: str
    role: Role


@dataclass(frozen=True)
class Principal:
    """Who is acting: id, display name and role."""

    id: str
    display_name: str
    role: Role

    @staticmethod
    def of(user: User) -> Principal:
        return Principal(id=user.id, display_name=user.name, role=user.role)
