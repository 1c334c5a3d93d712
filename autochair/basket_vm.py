"""View model for the shopping basket."""

from __future__ import annotations

from autochair.account_models import PurchaseOrdersModel, UsersModel
from autochair.display import (
    DisplayProduct,
    DisplayPurchaseOrder,
    order_from_display,
    product_to_display,
)
from autochair.entities import Product
from autochair.shop_models import ProductsModel
from autochair.signals import Signal

NEW_ORDER_STATUS = "Sending to delivery"


class BasketViewModel:
    """Keeps the products in the basket and turns them into purchase orders."""

    def __init__(
        self,
        products_model: ProductsModel,
        orders_model: PurchaseOrdersModel,
        users_model: UsersModel,
    ) -> None:
        self.products_model = products_model
        self.orders_model = orders_model
        self.users_model = users_model
        self.products_in_basket: list[DisplayProduct] = []

        self.error_occurred = Signal()
        self.added_to_basket = Signal()
        self.order_created = Signal()

        products_model.add_to_basket_success.connect(self._on_added_to_basket)
        orders_model.order_created.connect(self._on_order_created)

    def add_to_basket(self, product_id: str) -> None:
        self.products_model.add_to_basket(product_id)

    def create_order(self, order: DisplayPurchaseOrder) -> None:
        """Send one order per basket product, for the signed-in user."""
        template = order_from_display(order)
        template.user_id = self.users_model.user.id
        template.status = NEW_ORDER_STATUS
        orders = []
        for product in self.products_in_basket:
            item = order_from_display(order)
            item.user_id = template.user_id
            item.status = template.status
            item.product_id = product.id
            orders.append(item)
        self.orders_model.create_order(orders)

    def remove_from_basket(self, product_id: str) -> None:
        """Remove the first basket entry with ``product_id``, if any."""
        for index, product in enumerate(self.products_in_basket):
            if product.id == product_id:
                del self.products_in_basket[index]
                break
        self.added_to_basket.emit()

    def _on_added_to_basket(self, product: Product) -> None:
        self.products_in_basket.append(product_to_display(product))
        self.added_to_basket.emit()

    def _on_order_created(self) -> None:
        self.products_in_basket.clear()
        self.order_created.emit()