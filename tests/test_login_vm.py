import pytest

from autochair.account_models import UsersModel
from autochair.display import DisplayUser
from autochair.entities import User
from autochair.login_vm import LoginRegistrationViewModel
from autochair.signals import Signal

API_SIGNALS = (
    "login_registration_error",
    "user_login_successful",
    "user_registered_successfully",
    "code_sent_successfully",
    "account_error",
    "user_fetched",
    "email_changed_successfully",
    "password_changed_successfully",
    "delete_account_successfully",
)


class FakeApi:
    def __init__(self):
        self.calls = []
        for name in API_SIGNALS:
            setattr(self, name, Signal())

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)

        def record(*args):
            self.calls.append((name, args))

        return record


@pytest.fixture
def setup():
    api = FakeApi()
    model = UsersModel(api)
    return api, model, LoginRegistrationViewModel(model)


def test_login_converts_display_user(setup):
    api, _, vm = setup
    password = "password"
    vm.login_user(DisplayUser(id="1", name="Ann", email="ann@example.com", password=password))
    assert api.calls == [
        ("login_user", (User(id="1", name="Ann", email="ann@example.com", password=password),))
    ]


def test_register_passes_code(setup):
    api, _, vm = setup
    vm.register_user(DisplayUser(surname="Lee"), "12345678")
    assert api.calls == [("register_user", (User(surname="Lee"), "12345678"))]


def test_send_code_forwards_email(setup):
    api, _, vm = setup
    vm.send_code("ann@example.com")
    assert api.calls == [("send_code", ("ann@example.com",))]


def test_errors_reach_view_model(setup):
    api, _, vm = setup
    errors = []
    vm.error_occurred.connect(errors.append)
    api.login_registration_error.emit("wrong password")
    assert errors == ["wrong password"]


def test_success_signals_reach_view_model(setup):
    api, model, vm = setup
    events = []
    vm.user_login_successful.connect(lambda: events.append("login"))
    vm.user_registered_successfully.connect(lambda: events.append("register"))
    api.user_login_successful.emit(User(id="1"))
    api.user_registered_successfully.emit(User(id="2"))
    assert events == ["login", "register"]
    assert model.user == User(id="2")