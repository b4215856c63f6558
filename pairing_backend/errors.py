"""Custom exceptions for the pairing backend."""


class PairingError(Exception):
    """Base exception for the pairing backend."""

    pass


class InvalidDishError(PairingError):
    """Raised when the dish name is missing or blank."""

    pass


class EmptyCatalogError(PairingError):
    """Raised when the drink catalogue has no entries."""

    pass


class CatalogError(PairingError):
    """Raised when the drink catalogue file cannot be read or is invalid."""

    pass
