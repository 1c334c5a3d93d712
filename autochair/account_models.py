"""Models holding the signed-in user and their purchase orders.

Both wrap an API client object. The client is expected to provide these
methods: login_user, register_user, send_code, edit_user, email_change_code,
change_code, email_change, password_change, delete_account,
fetch_purchase_orders, create_purchase_order; and these Signal attributes:
login_registration_error, user_login_successful, user_registered_successfully,
code_sent_successfully, account_error, user_fetched,
email_changed_successfully, password_changed_successfully,
delete_account_successfully, purchase_orders_error, purchase_orders_fetched,
order_created.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from autochair.entities import PurchaseOrder, User
from autochair.signals import Signal

log = logging.getLogger(__name__)


class PurchaseOrdersModel:
    """Caches the user's purchase orders and forwards order requests."""

    def __init__(self, api: Any) -> None:
        self.api = api
        self.purchase_orders: list[PurchaseOrder] = []

        self.purchase_order_error = Signal()
        self.purchase_orders_fetched = Signal()
        self.order_cancelled = Signal()
        self.order_created = Signal()

        api.purchase_orders_fetched.connect(self._on_purchase_orders_fetched)
        api.purchase_orders_error.connect(self.purchase_order_error.emit)
        api.order_created.connect(self.order_created.emit)

    def fetch_purchase_orders(self, user_id: str) -> None:
        self.api.fetch_purchase_orders(user_id)

    def create_order(self, orders: Iterable[PurchaseOrder]) -> None:
        self.api.create_purchase_order(list(orders))

    def cancel_order(self, order_id: str) -> None:
        """Drop a cached order; the server offers no cancel request."""
        kept = [order for order in self.purchase_orders if order.id != order_id]
        if len(kept) == len(self.purchase_orders):
            raise LookupError(f"no purchase order with id {order_id!r}")
        self.purchase_orders = kept
        self.order_cancelled.emit()

    def _on_purchase_orders_fetched(self, orders: Iterable[PurchaseOrder]) -> None:
        log.debug("purchase orders fetched")
        self.purchase_orders = list(orders)
        self.purchase_orders_fetched.emit()


class UsersModel:
    """Holds the current user and forwards account requests."""

    def __init__(self, api: Any) -> None:
        self.api = api
        self.user = User()

        self.login_registration_error = Signal()
        self.user_login_successful = Signal()
        self.user_registered_successfully = Signal()
        self.code_sent_successfully = Signal()
        self.account_error = Signal()
        self.user_fetched = Signal()
        self.password_changed_successfully = Signal()
        self.delete_account_successfully = Signal()

        api.login_registration_error.connect(self.login_registration_error.emit)
        api.user_login_successful.connect(self._on_login_successful)
        api.user_registered_successfully.connect(self._on_registered)
        api.code_sent_successfully.connect(self.code_sent_successfully.emit)
        api.account_error.connect(self.account_error.emit)
        api.user_fetched.connect(self._on_user_fetched)
        api.email_changed_successfully.connect(self._on_user_fetched)
        api.password_changed_successfully.connect(self.password_changed_successfully.emit)
        api.delete_account_successfully.connect(self.delete_account_successfully.emit)

    def login_user(self, user: User) -> None:
        self.api.login_user(user)

    def register_user(self, user: User, code: str) -> None:
        self.api.register_user(user, code)

    def send_code(self, email: str) -> None:
        self.api.send_code(email)

    def edit_user(self, user: User) -> None:
        self.api.edit_user(user)

    def email_change_code(self, email: str) -> None:
        self.api.email_change_code(email)

    def change_code(self, email: str) -> None:
        self.api.change_code(email)

    def email_change(self, old_email: str, new_email: str, code: str) -> None:
        self.api.email_change(old_email, new_email, code)

    def password_change(
        self, email: str, old_password: str, new_password: str, code: str
    ) -> None:
        self.api.password_change(email, old_password, new_password, code)

    def delete_account(self, email: str, code: str) -> None:
        self.api.delete_account(email, code)

    def _on_login_successful(self, user: User) -> None:
        self.user = user
        self.user_login_successful.emit()

    def _on_registered(self, user: User) -> None:
        self.user = user
        self.user_registered_successfully.emit()

    def _on_user_fetched(self, user: User) -> None:
        self.user = user
        log.debug("user fetched: %s %s <%s>", user.name, user.surname, user.email)
        self.user_fetched.emit()