"""Exceptions raised by the testing library."""


class SSTestError(RuntimeError):
    """General runtime failure inside the testing library."""

    name = "SSTestError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class InvalidArgumentError(ValueError):
    """An argument given to the testing library was not valid."""

    name = "InvalidArgumentError"

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message