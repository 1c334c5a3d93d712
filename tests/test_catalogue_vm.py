import pytest

from autochair.catalogue_vm import CatalogueViewModel
from autochair.entities import (
    BaseSeat,
    ChildSeat,
    LuxurySeat,
    Photo,
    Product,
    SportSeat,
)
from autochair.shop_models import PhotosModel, ProductsModel
from autochair.signals import Signal


class FakeApi:
    def __init__(self):
        self.calls = []
        for name in (
            "photos_fetched",
            "photos_error",
            "products_fetched",
            "base_seats_fetched",
            "child_seats_fetched",
            "sport_seats_fetched",
            "luxury_seats_fetched",
            "products_error",
        ):
            setattr(self, name, Signal())

    def fetch_photos(self):
        self.calls.append("photos")

    def fetch_products(self):
        self.calls.append("products")

    def fetch_base_seats(self):
        self.calls.append("base")

    def fetch_child_seats(self):
        self.calls.append("child")

    def fetch_sport_seats(self):
        self.calls.append("sport")

    def fetch_luxury_seats(self):
        self.calls.append("luxury")


@pytest.fixture
def setup():
    api = FakeApi()
    products = ProductsModel(api)
    photos = PhotosModel(api)
    vm = CatalogueViewModel(products, photos)
    return api, vm


def _counter(signal):
    hits = []
    signal.connect(lambda: hits.append(1))
    return hits


def _products():
    return [
        Product(id="p1", product_name="Base A", product_type="1", product_type_id="b1"),
        Product(id="p2", product_name="Base B", product_type="1", product_type_id="b2"),
        Product(id="p3", product_name="Child A", product_type="2", product_type_id="c1"),
        Product(id="p4", product_name="Child B", product_type="2", product_type_id="c2"),
        Product(id="p5", product_name="Sport A", product_type="3", product_type_id="s1"),
        Product(id="p6", product_name="Lux A", product_type="4", product_type_id="l1"),
    ]


def test_fetch_products_requests_catalogues_then_products(setup):
    api, vm = setup
    vm.fetch_products()
    assert api.calls == ["base", "child", "sport", "luxury", "products"]


def test_products_fetched_carries_photos(setup):
    api, vm = setup
    api.photos_fetched.emit([Photo(product_type="1", product_type_id="b1", image="img-b1")])
    hits = _counter(vm.products_fetched)
    api.products_fetched.emit(_products())
    assert [p.id for p in vm.products] == ["p1", "p2", "p3", "p4", "p5", "p6"]
    assert vm.products[0].photo == "img-b1"
    assert vm.products[1].photo == ""
    assert hits == [1]


def test_seat_fetches_convert_with_images(setup):
    api, vm = setup
    api.photos_fetched.emit(
        [
            Photo(product_type="2", product_type_id="c1", image="child-img"),
            Photo(product_type="4", product_type_id="l1", image="lux-img"),
        ]
    )
    child_hits = _counter(vm.child_seats_fetched)
    api.child_seats_fetched.emit([ChildSeat(id="c1", brand="Kid")])
    api.luxury_seats_fetched.emit([LuxurySeat(id="l1", comfort_level="High")])
    api.sport_seats_fetched.emit([SportSeat(id="s1", shell_type="Shell")])
    api.base_seats_fetched.emit([BaseSeat(id="b1", type="Plain")])
    assert vm.child_seats[0].image == "child-img"
    assert vm.child_seats[0].brand == "Kid"
    assert vm.luxury_seats[0].image == "lux-img"
    assert vm.luxury_seats[0].comfort_level == "High"
    assert vm.sport_seats[0].shell_type == "Shell"
    assert vm.base_seats[0].type == "Plain"
    assert child_hits == [1]


def test_base_filter_checks_each_seat(setup):
    api, vm = setup
    api.base_seats_fetched.emit(
        [
            BaseSeat(id="b1", brand="Acme"),
            BaseSeat(id="b2", brand="Other"),
            BaseSeat(id="b3", brand="Acme"),
        ]
    )
    api.products_fetched.emit(_products())
    hits = _counter(vm.products_filtered)
    vm.filter_base_seats(["Acme"], [], [], [], [])
    assert [s.id for s in vm.base_seats] == ["b1", "b3"]
    assert [p.id for p in vm.products] == ["p1", "p3", "p4", "p5", "p6"]
    assert hits == [1]


def test_base_filter_empty_lists_keep_everything(setup):
    api, vm = setup
    api.base_seats_fetched.emit([BaseSeat(id="b1"), BaseSeat(id="b2")])
    api.products_fetched.emit(_products())
    vm.filter_base_seats([], [], [], [], [])
    assert [s.id for s in vm.base_seats] == ["b1", "b2"]
    assert len(vm.products) == len(_products())


def test_base_filter_requires_all_criteria(setup):
    api, vm = setup
    api.base_seats_fetched.emit(
        [
            BaseSeat(id="b1", brand="Acme", color="Red"),
            BaseSeat(id="b2", brand="Acme", color="Blue"),
        ]
    )
    vm.filter_base_seats(["Acme"], [], ["Blue"], [], [])
    assert [s.id for s in vm.base_seats] == ["b2"]


def test_child_filter_stops_at_first_mismatch(setup):
    api, vm = setup
    api.child_seats_fetched.emit(
        [
            ChildSeat(id="c1", age="0-1"),
            ChildSeat(id="c2", age="4-7"),
            ChildSeat(id="c3", age="0-1"),
        ]
    )
    api.products_fetched.emit(_products())
    vm.filter_child_seats([], ["0-1"], [], [], [], [], [])
    assert [s.id for s in vm.child_seats] == ["c1"]
    assert [p.id for p in vm.products] == ["p1", "p2", "p3", "p5", "p6"]


def test_sport_filter_no_match_drops_sport_products(setup):
    api, vm = setup
    api.sport_seats_fetched.emit([SportSeat(id="s1", color="Black")])
    api.products_fetched.emit(_products())
    vm.filter_sport_seats([], [], [], [], [], ["White"])
    assert vm.sport_seats == []
    assert "p5" not in [p.id for p in vm.products]
    assert len(vm.products) == len(_products()) - 1


def test_luxury_filter_keeps_matching(setup):
    api, vm = setup
    api.luxury_seats_fetched.emit([LuxurySeat(id="l1", custom_design="Yes")])
    api.products_fetched.emit(_products())
    vm.filter_luxury_seats([], [], [], [], [], ["Yes"])
    assert [s.id for s in vm.luxury_seats] == ["l1"]
    assert "p6" in [p.id for p in vm.products]


def test_clear_filters_restores_all(setup):
    api, vm = setup
    api.base_seats_fetched.emit([BaseSeat(id="b1", brand="Acme"), BaseSeat(id="b2")])
    api.child_seats_fetched.emit([ChildSeat(id="c1")])
    api.products_fetched.emit(_products())
    vm.filter_base_seats(["Nobody"], [], [], [], [])
    assert vm.base_seats == []
    hits = _counter(vm.products_filtered)
    vm.clear_filters()
    assert [s.id for s in vm.base_seats] == ["b1", "b2"]
    assert [s.id for s in vm.child_seats] == ["c1"]
    assert [p.id for p in vm.products] == [p.id for p in _products()]
    assert hits == [1]