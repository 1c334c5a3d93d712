"""Records exchanged with the shop server."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProductType(str, Enum):
    """Kind of seat a product refers to, as the server encodes it."""

    BASE = "1"
    CHILD = "2"
    SPORT = "3"
    LUXURY = "4"


@dataclass
class User:
    id: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    password: str = ""


@dataclass
class Product:
    id: str = ""
    product_name: str = ""
    product_type: str = ""
    product_type_id: str = ""
    price: str = ""
    price_unit: str = ""
    discount: str = ""
    has_discount: str = ""


@dataclass
class BaseSeat:
    id: str = ""
    brand: str = ""
    suitable_for: str = ""
    color: str = ""
    material: str = ""
    type: str = ""
    description: str = ""


@dataclass
class ChildSeat:
    id: str = ""
    brand: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    safety_key: str = ""
    fastening: str = ""
    driveway: str = ""
    description: str = ""


@dataclass
class SportSeat:
    id: str = ""
    brand: str = ""
    suitable_for: str = ""
    shell_type: str = ""
    shell_material: str = ""
    cover_material: str = ""
    color: str = ""
    description: str = ""


@dataclass
class LuxurySeat:
    id: str = ""
    brand: str = ""
    suitable_for: str = ""
    color: str = ""
    material: str = ""
    comfort_level: str = ""
    custom_design: str = ""
    description: str = ""


@dataclass
class PurchaseOrder:
    id: str = ""
    user_id: str = ""
    product_id: str = ""
    paid_type: str = ""
    delivery_date: str = ""
    destination: str = ""
    package_id: str = ""
    status: str = ""


@dataclass
class Photo:
    id: str = ""
    product_type: str = ""
    product_type_id: str = ""
    image: str = ""