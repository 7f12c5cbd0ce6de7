"""Role checks for application use cases."""

from __future__ import annotations

from qpos.domain.exceptions import AccessDenied
from qpos.domain.model.user import Principal, Role

FRONT_OF_HOUSE = (Role.ADMIN, Role.CASHIER)
BACK_OFFICE = (Role.ADMIN,)
ALL_ROLES = tuple(Role)


def ensure_role(principal: Principal, allowed: tuple[Role, ...], action: str) -> None:
    if principal.role not in allowed:
        raise AccessDenied(
            f"{principal.display_name} ({principal.role.value}) may not {action}"
        )
