import pytest

from gff.errors import set_error_handler


@pytest.fixture(autouse=True)
def clear_error_handler():
    """Each test starts and ends without an error handler."""
    set_error_handler(None)
    yield
    set_error_handler(None)
