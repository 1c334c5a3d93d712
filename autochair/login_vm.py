"""View model for the login and registration screen."""

from __future__ import annotations

from autochair.account_models import UsersModel
from autochair.display import DisplayUser, user_from_display
from autochair.signals import Signal


class LoginRegistrationViewModel:
    """Turns display users into server users and relays login results."""

    def __init__(self, users_model: UsersModel) -> None:
        self.users_model = users_model

        self.error_occurred = Signal()
        self.user_login_successful = Signal()
        self.user_registered_successfully = Signal()

        users_model.login_registration_error.connect(self.error_occurred.emit)
        users_model.user_login_successful.connect(self.user_login_successful.emit)
        users_model.user_registered_successfully.connect(
            self.user_registered_successfully.emit
        )

    def login_user(self, user: DisplayUser) -> None:
        self.users_model.login_user(user_from_display(user))

    def register_user(self, user: DisplayUser, code: str) -> None:
        self.users_model.register_user(user_from_display(user), code)

    def send_code(self, email: str) -> None:
        self.users_model.send_code(email)