"""Checks on the account page's forms and the layout of its order table."""

from __future__ import annotations

from typing import Iterable

from autochair.display import DisplayPurchaseOrder, DisplayUser

CODE_LENGTH = 8

ORDER_COLUMNS = (
    "Id",
    "ProductId",
    "Name",
    "Package ID",
    "Payment",
    "Date",
    "Destination",
    "Status",
)


class FormError(ValueError):
    """A form was filled in wrongly; the message is meant for the user."""


def validate_profile_edit(surname: str, name: str, email: str) -> DisplayUser:
    """Return the edited user, or raise if the surname or name is empty."""
    if not surname or not name:
        raise FormError("Please fill all fields")
    return DisplayUser(name=name, surname=surname, email=email)


def validate_email_change_code(new_email: str, confirm_email: str) -> str:
    """Return the address a change code is to be sent to."""
    if not new_email or not confirm_email:
        raise FormError("Please enter email in both fields")
    if new_email != confirm_email:
        raise FormError("Emails do not match. Please enter the same email in both fields")
    return new_email


def validate_email_change(new_email: str, confirm_email: str, code: str) -> str | None:
    """Return the new address to save, or None when the two addresses differ.

    Differing addresses send nothing and show no error.
    """
    if not new_email or not confirm_email or not code:
        raise FormError("Please fill all fields")
    if new_email != confirm_email:
        return None
    return new_email


def validate_password_change(
    old_password: str, new_password: str, confirm_password: str, code: str
) -> str:
    """Return the new password, or raise if a field is empty or they differ."""
    if not old_password or not new_password or not confirm_password or not code:
        raise FormError("Please fill all fields")
    if new_password != confirm_password:
        raise FormError(
            "Passwords do not match. Please enter the same password in both fields"
        )
    return new_password


def validate_delete_code(code: str) -> str:
    """Return the account deletion code if it has exactly eight characters."""
    if len(code) != CODE_LENGTH:
        raise FormError("Please enter code")
    return code


def order_rows(orders: Iterable[DisplayPurchaseOrder]) -> list[tuple[str, ...]]:
    """Rows of the order table, one per order, in ``ORDER_COLUMNS`` order."""
    return [
        (
            order.id,
            order.product_id,
            order.product_name,
            order.package_id,
            order.paid_type,
            order.date,
            order.destination,
            order.status,
        )
        for order in orders
    ]