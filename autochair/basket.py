"""Basket pricing and checkout checks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from autochair.display import DisplayProduct, DisplayPurchaseOrder

DELIVERY_PRICE = 100
DISCOUNT_FLAG = "TRUE"

_INTEGER = re.compile(r"\s*([+-]?\d+)\s*")


class CheckoutError(ValueError):
    """The basket cannot be turned into an order."""


@dataclass(frozen=True)
class BasketLine:
    id: str
    name: str
    price: int
    price_unit: str


@dataclass(frozen=True)
class BasketSummary:
    lines: tuple[BasketLine, ...]
    delivery_price: int
    total_price: int


def _to_int(text: str) -> int:
    """Parse a whole number; text that is not one counts as 0."""
    match = _INTEGER.fullmatch(text)
    return int(match.group(1)) if match else 0


def _per_hundred(value: int) -> int:
    """Divide by 100, truncating toward zero."""
    quotient = abs(value) // 100
    return quotient if value >= 0 else -quotient


def line_price(product: DisplayProduct) -> int:
    """Price of one product, less its discount when the discount is active.

    The discount is applied per whole hundred of the price.
    """
    price = _to_int(product.price)
    if product.has_discount == DISCOUNT_FLAG:
        price -= _to_int(product.discount) * _per_hundred(price)
    return price


def summarize(products: Iterable[DisplayProduct]) -> BasketSummary:
    """Table lines, delivery cost and total (delivery included) of a basket."""
    lines = tuple(
        BasketLine(
            id=product.id,
            name=product.name,
            price=line_price(product),
            price_unit=product.price_unit,
        )
        for product in products
    )
    delivery = DELIVERY_PRICE * len(lines)
    total = sum(line.price for line in lines) + delivery
    return BasketSummary(lines=lines, delivery_price=delivery, total_price=total)


def checkout_order(
    products: Iterable[DisplayProduct],
    address: str,
    paid_type: str,
    delivery_type: str,
) -> DisplayPurchaseOrder:
    """Build the order for a checkout, or raise CheckoutError."""
    if not list(products):
        raise CheckoutError("Basket is empty")
    if not address:
        raise CheckoutError("Adress is empty")
    return DisplayPurchaseOrder(
        paid_type=paid_type,
        delivery_type=delivery_type,
        destination=address,
    )