"""Exception hierarchy for prepkit."""

from __future__ import annotations


class PrepKitError(Exception):
    """Base exception for prepkit."""

    pass


class InvalidConfigError(PrepKitError):
    """Invalid configuration provided."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid configuration: {message}")


class InvalidInputError(PrepKitError):
    """Input passed to fit or transform cannot be used."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Invalid input: {message}")


class NotFittedError(PrepKitError):
    """Operation requires parameters that have not been fitted yet."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} has not been fitted")
