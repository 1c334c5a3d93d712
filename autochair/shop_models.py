"""Models holding the shop catalogue: products, seats and their photos.

Both wrap an API client object. The client is expected to provide the
methods fetch_photos, fetch_products, fetch_base_seats, fetch_child_seats,
fetch_sport_seats and fetch_luxury_seats. It must also provide these Signal
attributes: photos_fetched, photos_error, products_fetched,
base_seats_fetched, child_seats_fetched, sport_seats_fetched,
luxury_seats_fetched and products_error.
"""

from __future__ import annotations

from typing import Any, Iterable

from autochair.entities import (
    BaseSeat,
    ChildSeat,
    LuxurySeat,
    Photo,
    Product,
    SportSeat,
)
from autochair.signals import Signal


class PhotosModel:
    """Caches product photos and looks them up by seat kind and seat id."""

    def __init__(self, api: Any) -> None:
        self.api = api
        self.photos: list[Photo] = []

        self.photos_error = Signal()

        api.photos_fetched.connect(self._on_photos_fetched)
        api.photos_error.connect(self.photos_error.emit)

    def fetch_photos(self) -> None:
        self.api.fetch_photos()

    def photo_for(self, product_type: str, type_id: str) -> str:
        """Return the image of the first matching photo, or an empty string."""
        return next(
            (
                photo.image
                for photo in self.photos
                if photo.product_type_id == type_id and photo.product_type == product_type
            ),
            "",
        )

    def _on_photos_fetched(self, photos: Iterable[Photo]) -> None:
        self.photos = list(photos)


class ProductsModel:
    """Caches products and the four seat catalogues."""

    def __init__(self, api: Any) -> None:
        self.api = api
        self.products: list[Product] = []
        self.base_seats: list[BaseSeat] = []
        self.child_seats: list[ChildSeat] = []
        self.sport_seats: list[SportSeat] = []
        self.luxury_seats: list[LuxurySeat] = []

        self.error_occurred = Signal()
        self.products_fetched = Signal()
        self.base_seats_fetched = Signal()
        self.child_seats_fetched = Signal()
        self.sport_seats_fetched = Signal()
        self.luxury_seats_fetched = Signal()
        self.product_loaded = Signal()
        self.base_seat_loaded = Signal()
        self.child_seat_loaded = Signal()
        self.sport_seat_loaded = Signal()
        self.luxury_seat_loaded = Signal()
        self.add_to_basket_success = Signal()

        api.products_fetched.connect(self._on_products_fetched)
        api.base_seats_fetched.connect(self._on_base_seats_fetched)
        api.child_seats_fetched.connect(self._on_child_seats_fetched)
        api.sport_seats_fetched.connect(self._on_sport_seats_fetched)
        api.luxury_seats_fetched.connect(self._on_luxury_seats_fetched)
        api.products_error.connect(self.error_occurred.emit)

    def fetch_products(self) -> None:
        """Request every seat catalogue, then the product list."""
        self.api.fetch_base_seats()
        self.api.fetch_child_seats()
        self.api.fetch_sport_seats()
        self.api.fetch_luxury_seats()
        self.api.fetch_products()

    def name_by_id(self, product_id: str) -> str:
        """Return the product's name, or an empty string if it is unknown."""
        return next(
            (product.product_name for product in self.products if product.id == product_id),
            "",
        )

    def load_seat(self, product_id: str) -> None:
        """Emit the seat behind every product with ``product_id``.

        Raises ValueError if such a product's type is not a number.
        """
        for product in self.products:
            if product.id != product_id:
                continue
            catalogue = self._catalogues().get(int(product.product_type))
            if catalogue is None:
                continue
            seats, signal = catalogue
            seat = next(
                (seat for seat in seats if seat.id == product.product_type_id), None
            )
            if seat is not None:
                signal.emit(seat)

    def load_product(self, product_id: str) -> None:
        product = self._find(product_id)
        if product is not None:
            self.product_loaded.emit(product)

    def add_to_basket(self, product_id: str) -> None:
        product = self._find(product_id)
        if product is not None:
            self.add_to_basket_success.emit(product)

    def _find(self, product_id: str) -> Product | None:
        return next((p for p in self.products if p.id == product_id), None)

    def _catalogues(self) -> dict[int, tuple[list[Any], Signal]]:
        return {
            1: (self.base_seats, self.base_seat_loaded),
            2: (self.child_seats, self.child_seat_loaded),
            3: (self.sport_seats, self.sport_seat_loaded),
            4: (self.luxury_seats, self.luxury_seat_loaded),
        }

    def _on_products_fetched(self, products: Iterable[Product]) -> None:
        self.products = list(products)
        self.products_fetched.emit()

    def _on_base_seats_fetched(self, seats: Iterable[BaseSeat]) -> None:
        self.base_seats = list(seats)
        self.base_seats_fetched.emit()

    def _on_child_seats_fetched(self, seats: Iterable[ChildSeat]) -> None:
        self.child_seats = list(seats)
        self.child_seats_fetched.emit()

    def _on_sport_seats_fetched(self, seats: Iterable[SportSeat]) -> None:
        self.sport_seats = list(seats)
        self.sport_seats_fetched.emit()

    def _on_luxury_seats_fetched(self, seats: Iterable[LuxurySeat]) -> None:
        self.luxury_seats = list(seats)
        self.luxury_seats_fetched.emit()