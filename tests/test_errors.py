"""
Tests for the error classes and the diagnostics channel.
"""

import threading

import pytest

from gff.errors import (
    DuplicateFieldError,
    FormCreationError,
    GFFError,
    error_handler,
    get_error_handler,
    handle_error,
    set_error_handler,
)
from gff.form import create_form


class TestErrorTypes:

    def test_duplicate_field_error_names_field(self):
        err = DuplicateFieldError("email", "A different field with this ID already exists")
        assert err.field_id == "email"
        assert str(err) == 'Field ID "email" already exists: A different field with this ID already exists'

    def test_hierarchy(self):
        assert issubclass(FormCreationError, GFFError)
        assert issubclass(DuplicateFieldError, GFFError)


class TestErrorHandler:
    """Test the handler registry and handle_error."""

    def test_initially_absent(self):
        assert get_error_handler() is None

    def test_set_and_clear(self):
        def handler(err):
            pass

        set_error_handler(handler)
        assert get_error_handler() is handler
        set_error_handler(None)
        assert get_error_handler() is None

    def test_handler_sees_error_and_error_is_still_raised(self):
        seen = []
        set_error_handler(seen.append)

        with pytest.raises(FormCreationError, match="formId must be a non-empty string"):
            create_form("")

        assert len(seen) == 1
        assert isinstance(seen[0], FormCreationError)

    def test_raising_handler_does_not_replace_error(self):
        calls = []

        def handler(err):
            calls.append(err)
            raise RuntimeError("handler failure")

        set_error_handler(handler)

        with pytest.raises(FormCreationError):
            create_form("")

        assert len(calls) == 1

    def test_handle_error_without_handler(self):
        err = FormCreationError("boom")
        with pytest.raises(FormCreationError) as exc_info:
            handle_error(err)
        assert exc_info.value is err

    def test_scoped_handler_restores_previous(self):
        outer = []
        inner = []
        set_error_handler(outer.append)

        with error_handler(inner.append):
            with pytest.raises(FormCreationError):
                create_form("")

        assert get_error_handler() == outer.append
        assert len(inner) == 1
        assert outer == []

    def test_handler_does_not_leak_into_other_threads(self):
        set_error_handler(lambda err: None)
        seen = []

        thread = threading.Thread(target=lambda: seen.append(get_error_handler()))
        thread.start()
        thread.join()

        assert seen == [None]
