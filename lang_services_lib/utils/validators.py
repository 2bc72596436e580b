"""
Argument validators used by the service clients.

Each helper raises :class:`InvalidArgumentError` with the supplied message so
that a bad call fails before any request is built or sent.
"""

from typing import Any, Optional, Sized

from lang_services_lib.exceptions import InvalidArgumentError


def not_null(value: Any, message: str) -> None:
    if value is None:
        raise InvalidArgumentError(message)


def not_empty(value: Optional[Sized], message: str) -> None:
    """
    Ensure ``value`` is neither ``None`` nor empty.

    Strings made only of whitespace count as empty.
    """
    if value is None or len(value) == 0:
        raise InvalidArgumentError(message)
    if isinstance(value, str) and not value.strip():
        raise InvalidArgumentError(message)


def is_true(expression: bool, message: str) -> None:
    if not expression:
        raise InvalidArgumentError(message)
