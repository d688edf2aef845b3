"""Exceptions raised by the containers."""

from typing import NoReturn

__all__ = [
    "ContainerError",
    "RangeError",
    "ContainerOverflowError",
    "ContainerUnderflowError",
    "throw_range_error",
]


class ContainerError(RuntimeError):
    """A runtime failure reported by a container."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RangeError(ContainerError):
    """A result fell outside the range a container can represent."""


class ContainerOverflowError(ContainerError):
    """An arithmetic or size overflow inside a container."""


class ContainerUnderflowError(ContainerError):
    """An arithmetic or size underflow inside a container."""


def throw_range_error(message: str) -> NoReturn:
    """Raise a :class:`RangeError` carrying *message*."""
    raise RangeError(message)