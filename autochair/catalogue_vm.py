"""View model for the catalogue: product listing and seat filters."""

from __future__ import annotations

from itertools import takewhile
from typing import Any, Callable, Iterable, Sequence

from autochair.display import (
    DisplayBaseSeat,
    DisplayChildSeat,
    DisplayLuxurySeat,
    DisplayProduct,
    DisplaySportSeat,
    base_seat_to_display,
    child_seat_to_display,
    luxury_seat_to_display,
    product_to_display,
    sport_seat_to_display,
)
from autochair.entities import (
    BaseSeat,
    ChildSeat,
    LuxurySeat,
    Product,
    ProductType,
    SportSeat,
)
from autochair.shop_models import PhotosModel, ProductsModel
from autochair.signals import Signal

Criteria = Sequence[tuple[Sequence[str], str]]


def _matches(criteria: Criteria) -> bool:
    """True if every non-empty list of allowed values holds the seat's value."""
    return all(not allowed or value in allowed for allowed, value in criteria)


class CatalogueViewModel:
    """Presents products and seats, and narrows them down by seat filters.

    The base seat filter checks every seat on its own. The child, sport and
    luxury filters keep seats only up to the first one that does not match.
    """

    def __init__(self, products_model: ProductsModel, photos_model: PhotosModel) -> None:
        self.products_model = products_model
        self.photos_model = photos_model

        self.products: list[DisplayProduct] = []
        self.base_seats: list[DisplayBaseSeat] = []
        self.child_seats: list[DisplayChildSeat] = []
        self.sport_seats: list[DisplaySportSeat] = []
        self.luxury_seats: list[DisplayLuxurySeat] = []

        self.error_occurred = Signal()
        self.products_fetched = Signal()
        self.base_seats_fetched = Signal()
        self.child_seats_fetched = Signal()
        self.sport_seats_fetched = Signal()
        self.luxury_seats_fetched = Signal()
        self.products_filtered = Signal()

        products_model.products_fetched.connect(self._on_products_fetched)
        products_model.base_seats_fetched.connect(self._on_base_seats_fetched)
        products_model.child_seats_fetched.connect(self._on_child_seats_fetched)
        products_model.sport_seats_fetched.connect(self._on_sport_seats_fetched)
        products_model.luxury_seats_fetched.connect(self._on_luxury_seats_fetched)

    def fetch_products(self) -> None:
        self.products_model.fetch_products()

    def filter_base_seats(
        self,
        brands: Sequence[str],
        suited_fors: Sequence[str],
        colors: Sequence[str],
        materials: Sequence[str],
        types: Sequence[str],
    ) -> None:
        self.base_seats = [
            self._base(seat)
            for seat in self.products_model.base_seats
            if _matches(
                [
                    (brands, seat.brand),
                    (suited_fors, seat.suitable_for),
                    (colors, seat.color),
                    (materials, seat.material),
                    (types, seat.type),
                ]
            )
        ]
        self._rebuild_products(ProductType.BASE, self.base_seats)

    def filter_child_seats(
        self,
        brands: Sequence[str],
        ages: Sequence[str],
        weights: Sequence[str],
        heights: Sequence[str],
        safety_keys: Sequence[str],
        fastenings: Sequence[str],
        driveways: Sequence[str],
    ) -> None:
        def accepted(seat: ChildSeat) -> bool:
            return _matches(
                [
                    (brands, seat.brand),
                    (ages, seat.age),
                    (weights, seat.weight),
                    (heights, seat.height),
                    (safety_keys, seat.safety_key),
                    (fastenings, seat.fastening),
                    (driveways, seat.driveway),
                ]
            )

        self.child_seats = self._leading(
            self.products_model.child_seats, accepted, self._child
        )
        self._rebuild_products(ProductType.CHILD, self.child_seats)

    def filter_sport_seats(
        self,
        brands: Sequence[str],
        suited_fors: Sequence[str],
        shell_types: Sequence[str],
        shell_materials: Sequence[str],
        cover_materials: Sequence[str],
        colors: Sequence[str],
    ) -> None:
        def accepted(seat: SportSeat) -> bool:
            return _matches(
                [
                    (brands, seat.brand),
                    (suited_fors, seat.suitable_for),
                    (shell_types, seat.shell_type),
                    (shell_materials, seat.shell_material),
                    (cover_materials, seat.cover_material),
                    (colors, seat.color),
                ]
            )

        self.sport_seats = self._leading(
            self.products_model.sport_seats, accepted, self._sport
        )
        self._rebuild_products(ProductType.SPORT, self.sport_seats)

    def filter_luxury_seats(
        self,
        brands: Sequence[str],
        suited_fors: Sequence[str],
        colors: Sequence[str],
        materials: Sequence[str],
        comforts: Sequence[str],
        custom_designs: Sequence[str],
    ) -> None:
        def accepted(seat: LuxurySeat) -> bool:
            return _matches(
                [
                    (brands, seat.brand),
                    (suited_fors, seat.suitable_for),
                    (colors, seat.color),
                    (materials, seat.material),
                    (comforts, seat.comfort_level),
                    (custom_designs, seat.custom_design),
                ]
            )

        self.luxury_seats = self._leading(
            self.products_model.luxury_seats, accepted, self._luxury
        )
        self._rebuild_products(ProductType.LUXURY, self.luxury_seats)

    def clear_filters(self) -> None:
        """Show every seat and every product again."""
        model = self.products_model
        self.base_seats = [self._base(seat) for seat in model.base_seats]
        self.child_seats = [self._child(seat) for seat in model.child_seats]
        self.sport_seats = [self._sport(seat) for seat in model.sport_seats]
        self.luxury_seats = [self._luxury(seat) for seat in model.luxury_seats]
        self.products = [self._product(product) for product in model.products]
        self.products_filtered.emit()

    @staticmethod
    def _leading(
        seats: Iterable[Any], accepted: Callable[[Any], bool], convert: Callable[[Any], Any]
    ) -> list[Any]:
        return [convert(seat) for seat in takewhile(accepted, seats)]

    def _rebuild_products(self, kind: ProductType, seats: Sequence[Any]) -> None:
        products: list[DisplayProduct] = []
        for product in self.products_model.products:
            if product.product_type == kind.value:
                products.extend(
                    self._product(product)
                    for seat in seats
                    if seat.id == product.product_type_id
                )
            else:
                products.append(self._product(product))
        self.products = products
        self.products_filtered.emit()

    def _product(self, product: Product) -> DisplayProduct:
        photo = self.photos_model.photo_for(product.product_type, product.product_type_id)
        return product_to_display(product, photo)

    def _image(self, kind: ProductType, seat_id: str) -> str:
        return self.photos_model.photo_for(kind.value, seat_id)

    def _base(self, seat: BaseSeat) -> DisplayBaseSeat:
        return base_seat_to_display(seat, self._image(ProductType.BASE, seat.id))

    def _child(self, seat: ChildSeat) -> DisplayChildSeat:
        return child_seat_to_display(seat, self._image(ProductType.CHILD, seat.id))

    def _sport(self, seat: SportSeat) -> DisplaySportSeat:
        return sport_seat_to_display(seat, self._image(ProductType.SPORT, seat.id))

    def _luxury(self, seat: LuxurySeat) -> DisplayLuxurySeat:
        return luxury_seat_to_display(seat, self._image(ProductType.LUXURY, seat.id))

    def _on_products_fetched(self) -> None:
        self.products = [self._product(product) for product in self.products_model.products]
        self.products_fetched.emit()

    def _on_base_seats_fetched(self) -> None:
        self.base_seats = [self._base(seat) for seat in self.products_model.base_seats]
        self.base_seats_fetched.emit()

    def _on_child_seats_fetched(self) -> None:
        self.child_seats = [self._child(seat) for seat in self.products_model.child_seats]
        self.child_seats_fetched.emit()

    def _on_sport_seats_fetched(self) -> None:
        self.sport_seats = [self._sport(seat) for seat in self.products_model.sport_seats]
        self.sport_seats_fetched.emit()

    def _on_luxury_seats_fetched(self) -> None:
        self.luxury_seats = [self._luxury(seat) for seat in self.products_model.luxury_seats]
        self.luxury_seats_fetched.emit()