"""
Errors and the diagnostics channel for GFF form construction.

Every domain error raised by this package goes through `handle_error`,
which first offers the error to the active error handler (if any) and then
raises it. A handler can observe errors (log them, count them, forward
them) but can never suppress or replace them.

The handler is held in a ContextVar rather than a module global, so a
handler set in one thread or async task does not leak into another.

Usage:
    with error_handler(lambda err: print("GFF error:", err)):
        create_form("")          # handler sees the error, then it is raised
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Callable, Iterator, NoReturn, Optional


logger = logging.getLogger(__name__)

ErrorHandler = Callable[[Exception], None]

_current_handler: ContextVar[Optional[ErrorHandler]] = ContextVar("gff_error_handler", default=None)


class GFFError(Exception):
    """Base class for all errors raised by the gff package."""


class FormCreationError(GFFError):
    """
    Raised for structurally invalid input.

    Examples: empty form id, field without id/type/caption, a slider without
    min/max, malformed JSON passed to `from_json`, updating a field that
    does not exist.
    """


class DuplicateFieldError(GFFError):
    """Raised when two fields share an id but are not deep-equal."""

    def __init__(self, field_id: str, message: str):
        super().__init__(f'Field ID "{field_id}" already exists: {message}')
        self.field_id = field_id


def set_error_handler(handler: Optional[ErrorHandler]) -> None:
    """Install `handler` for the current context (None clears it)."""
    _current_handler.set(handler)


def get_error_handler() -> Optional[ErrorHandler]:
    return _current_handler.get()


@contextmanager
def error_handler(handler: Optional[ErrorHandler]) -> Iterator[Optional[ErrorHandler]]:
    """Scope `handler` to a with-block, restoring the previous one on exit."""
    token = _current_handler.set(handler)
    try:
        yield handler
    finally:
        _current_handler.reset(token)


def handle_error(error: GFFError) -> NoReturn:
    """Offer `error` to the active handler, then raise it."""
    logger.debug("raising %s: %s", type(error).__name__, error)
    handler = _current_handler.get()
    if handler is not None:
        try:
            handler(error)
        except Exception:
            # A failing handler must not mask or replace the original error
            logger.debug("error handler raised while handling %r", error, exc_info=True)
    raise error


def raise_form_creation_error(message: str) -> NoReturn:
    handle_error(FormCreationError(message))


def raise_duplicate_field_error(field_id: str, message: str) -> NoReturn:
    handle_error(DuplicateFieldError(field_id, message))
