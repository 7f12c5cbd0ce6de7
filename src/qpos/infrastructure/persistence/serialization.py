"""Raw (JSON) <-> domain mapping shared by the key-value repositories.

Amounts are stored as decimal strings and timestamps as ISO-8601
strings; both are turned back into Decimal / datetime on load.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from qpos.domain.model.menu import Category, MenuItem
from qpos.domain.model.order import Order, OrderLine, OrderStatus, OrderTotals
from qpos.domain.model.settings import (
    DiscountType,
    GeneralSettings,
    RestaurantSettings,
    TaxConfiguration,
)
from qpos.domain.model.user import Role, User

# --- Menu ---------------------------------------------------------------------


def menu_item_to_raw(item: MenuItem) -> dict:
    return {
        "id": item.id,
        "name": item.name,
        "price": str(item.price),
        "category": item.category,
        "description": item.description,
        "image": item.image,
    }


def menu_item_from_raw(raw: dict) -> MenuItem:
    return MenuItem(
        id=str(raw["id"]),
        name=raw["name"],
        price=Decimal(str(raw["price"])),
        category=raw.get("category", ""),
        description=raw.get("description"),
        image=raw.get("image"),
    )


def category_to_raw(category: Category) -> dict:
    return {"id": category.id, "name": category.name, "icon": category.icon}


def category_from_raw(raw: dict) -> Category:
    return Category(id=raw["id"], name=raw["name"], icon=raw.get("icon", ""))


# --- Orders -------------------------------------------------------------------


def order_to_raw(order: Order) -> dict:
    totals = order.totals
    return {
        "id": order.id,
        "customer_name": order.customer_name,
        "status": order.status.value,
        "created_at": order.created_at.isoformat(),
        "lines": [
            {
                "id": line.id,
                "menu_item": menu_item_to_raw(line.menu_item),
                "quantity": line.quantity,
                "note": line.note,
            }
            for line in order.lines
        ],
        "totals": {
            "subtotal": str(totals.subtotal),
            "tax": str(totals.tax),
            "service_charge": str(totals.service_charge),
            "discount": str(totals.discount),
            "total": str(totals.total),
        },
    }


def order_from_raw(raw: dict) -> Order:
    totals = raw["totals"]
    return Order(
        id=raw["id"],
        customer_name=raw["customer_name"],
        lines=tuple(
            OrderLine(
                id=line["id"],
                menu_item=menu_item_from_raw(line["menu_item"]),
                quantity=int(line["quantity"]),
                note=line.get("note"),
            )
            for line in raw["lines"]
        ),
        totals=OrderTotals(
            subtotal=Decimal(totals["subtotal"]),
            tax=Decimal(totals["tax"]),
            service_charge=Decimal(totals["service_charge"]),
            discount=Decimal(totals["discount"]),
            total=Decimal(totals["total"]),
        ),
        created_at=datetime.fromisoformat(raw["created_at"]),
        status=OrderStatus(raw["status"]),
    )


# --- Settings -----------------------------------------------------------------


def tax_to_raw(config: TaxConfiguration) -> dict:
    return {
        "tax_rate": str(config.tax_rate),
        "service_charge_rate": str(config.service_charge_rate),
        "auto_apply_tax": config.auto_apply_tax,
        "auto_apply_service_charge": config.auto_apply_service_charge,
    }


def tax_from_raw(raw: dict) -> TaxConfiguration:
    return TaxConfiguration(
        tax_rate=Decimal(str(raw["tax_rate"])),
        service_charge_rate=Decimal(str(raw["service_charge_rate"])),
        auto_apply_tax=bool(raw["auto_apply_tax"]),
        auto_apply_service_charge=bool(raw["auto_apply_service_charge"]),
    )


def discount_to_raw(discount: DiscountType) -> dict:
    return {
        "id": discount.id,
        "name": discount.name,
        "percentage": str(discount.percentage),
        "active": discount.active,
    }


def discount_from_raw(raw: dict) -> DiscountType:
    return DiscountType(
        id=str(raw["id"]),
        name=raw["name"],
        percentage=Decimal(str(raw["percentage"])),
        active=bool(raw.get("active", True)),
    )


def restaurant_to_raw(settings: RestaurantSettings) -> dict:
    return {
        "name": settings.name,
        "address": settings.address,
        "phone": settings.phone,
        "email": settings.email,
        "website": settings.website,
    }


def restaurant_from_raw(raw: dict) -> RestaurantSettings:
    defaults = RestaurantSettings()
    return RestaurantSettings(
        name=raw.get("name", defaults.name),
        address=raw.get("address", defaults.address),
        phone=raw.get("phone", defaults.phone),
        email=raw.get("email", defaults.email),
        website=raw.get("website", defaults.website),
    )


def general_to_raw(settings: GeneralSettings) -> dict:
    return {"currency": settings.currency_code}


def general_from_raw(raw: dict) -> GeneralSettings:
    return GeneralSettings(currency_code=raw.get("currency", GeneralSettings().currency_code))


# --- Users --------------------------------------------------------------------


def user_to_raw(user: User) -> dict:
    return {"id": user.id, "name": user.name, "email": user.email, "role": user.role.value}


def user_from_raw(raw: dict) -> User:
    return User(
        id=str(raw["id"]),
        name=raw["name"],
        email=raw.get("email", ""),
        role=Role.parse(raw["role"]),
    )
