"""Records shaped for display and their conversion to and from server records."""

from __future__ import annotations

from dataclasses import dataclass

from autochair.entities import (
    BaseSeat,
    ChildSeat,
    LuxurySeat,
    Product,
    PurchaseOrder,
    SportSeat,
    User,
)


@dataclass
class DisplayUser:
    id: str = ""
    name: str = ""
    surname: str = ""
    email: str = ""
    password: str = ""


@dataclass
class DisplayProduct:
    id: str = ""
    name: str = ""
    type: str = ""
    photo: str = ""
    price: str = ""
    price_unit: str = ""
    discount: str = ""
    has_discount: str = ""


@dataclass
class DisplayBaseSeat:
    id: str = ""
    image: str = ""
    brand: str = ""
    suitable_for: str = ""
    color: str = ""
    material: str = ""
    type: str = ""
    description: str = ""


@dataclass
class DisplayChildSeat:
    id: str = ""
    image: str = ""
    brand: str = ""
    age: str = ""
    weight: str = ""
    height: str = ""
    safety_key: str = ""
    fastening: str = ""
    driveway: str = ""
    description: str = ""


@dataclass
class DisplaySportSeat:
    id: str = ""
    image: str = ""
    brand: str = ""
    suitable_for: str = ""
    shell_type: str = ""
    shell_material: str = ""
    cover_material: str = ""
    color: str = ""
    description: str = ""


@dataclass
class DisplayLuxurySeat:
    id: str = ""
    image: str = ""
    brand: str = ""
    suitable_for: str = ""
    color: str = ""
    material: str = ""
    comfort_level: str = ""
    custom_design: str = ""
    description: str = ""


@dataclass
class DisplayPurchaseOrder:
    id: str = ""
    user_id: str = ""
    product_id: str = ""
    product_name: str = ""
    paid_type: str = ""
    delivery_type: str = ""
    date: str = ""
    destination: str = ""
    package_id: str = ""
    status: str = ""


def user_to_display(user: User) -> DisplayUser:
    return DisplayUser(
        id=user.id,
        name=user.name,
        surname=user.surname,
        email=user.email,
        password=user.password,
    )


def user_from_display(data: DisplayUser) -> User:
    return User(
        id=data.id,
        name=data.name,
        surname=data.surname,
        email=data.email,
        password=data.password,
    )


def product_to_display(product: Product, photo: str = "") -> DisplayProduct:
    return DisplayProduct(
        id=product.id,
        name=product.product_name,
        type=product.product_type,
        photo=photo,
        price=product.price,
        price_unit=product.price_unit,
        discount=product.discount,
        has_discount=product.has_discount,
    )


def base_seat_to_display(seat: BaseSeat, image: str = "") -> DisplayBaseSeat:
    return DisplayBaseSeat(
        id=seat.id,
        image=image,
        brand=seat.brand,
        suitable_for=seat.suitable_for,
        color=seat.color,
        material=seat.material,
        type=seat.type,
        description=seat.description,
    )


def child_seat_to_display(seat: ChildSeat, image: str = "") -> DisplayChildSeat:
    return DisplayChildSeat(
        id=seat.id,
        image=image,
        brand=seat.brand,
        age=seat.age,
        weight=seat.weight,
        height=seat.height,
        safety_key=seat.safety_key,
        fastening=seat.fastening,
        driveway=seat.driveway,
        description=seat.description,
    )


def sport_seat_to_display(seat: SportSeat, image: str = "") -> DisplaySportSeat:
    return DisplaySportSeat(
        id=seat.id,
        image=image,
        brand=seat.brand,
        suitable_for=seat.suitable_for,
        shell_type=seat.shell_type,
        shell_material=seat.shell_material,
        cover_material=seat.cover_material,
        color=seat.color,
        description=seat.description,
    )


def luxury_seat_to_display(seat: LuxurySeat, image: str = "") -> DisplayLuxurySeat:
    return DisplayLuxurySeat(
        id=seat.id,
        image=image,
        brand=seat.brand,
        suitable_for=seat.suitable_for,
        color=seat.color,
        material=seat.material,
        comfort_level=seat.comfort_level,
        custom_design=seat.custom_design,
        description=seat.description,
    )


def order_to_display(order: PurchaseOrder, product_name: str = "") -> DisplayPurchaseOrder:
    return DisplayPurchaseOrder(
        id=order.id,
        user_id=order.user_id,
        product_id=order.product_id,
        product_name=product_name,
        paid_type=order.paid_type,
        date=order.delivery_date,
        destination=order.destination,
        package_id=order.package_id,
        status=order.status,
    )


def order_from_display(data: DisplayPurchaseOrder) -> PurchaseOrder:
    """Build a server order; the product name and delivery type are not sent."""
    return PurchaseOrder(
        id=data.id,
        user_id=data.user_id,
        product_id=data.product_id,
        paid_type=data.paid_type,
        delivery_date=data.date,
        destination=data.destination,
        package_id=data.package_id,
        status=data.status,
    )