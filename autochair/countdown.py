"""Cooldown for a "send code" button, driven by one tick per second."""

from __future__ import annotations

COOLDOWN_SECONDS = 60


class CodeCountdown:
    """Disables a button for a number of seconds and shows the time left.

    ``tick`` is to be called once a second by whatever clock drives the UI.
    """

    def __init__(self) -> None:
        self.remaining = 0
        self.label = ""
        self.enabled = True
        self.running = False

    def press(self) -> None:
        """The button was clicked: disable it and start the cooldown."""
        self.enabled = False
        self.start(COOLDOWN_SECONDS)

    def start(self, seconds: int) -> None:
        self.remaining = seconds
        self.label = f"{seconds}s"
        self.running = True

    def stop(self) -> None:
        self.running = False
        self.remaining = 0
        self.label = ""
        self.enabled = True

    def tick(self) -> None:
        """Advance by one second; the cooldown ends when no time is left."""
        if not self.running:
            return
        self.remaining -= 1
        if self.remaining > 0:
            self.label = f"{self.remaining}s"
        else:
            self.stop()