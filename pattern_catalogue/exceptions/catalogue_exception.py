class CatalogueException(Exception):
    """Base class for all exceptions raised by the pattern catalogue."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return f"{self.__class__.__name__}: {self.message}"


class InvalidMemento(CatalogueException):
    """Raised when an originator is asked to restore a memento it did not produce."""


class IncompatibleUnits(CatalogueException):
    """Raised when two measurements with different units are compared."""
