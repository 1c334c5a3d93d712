"""Client-side models, view models, basket pricing and form checks for a car seat shop."""

__version__ = "0.1.0"