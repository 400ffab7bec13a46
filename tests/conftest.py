import logging

import pytest


@pytest.fixture(autouse=True)
def reset_identicon_logger():
    """Drop handlers added by the CLI so they don't outlive captured streams."""
    yield
    root = logging.getLogger("identicon")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.NOTSET)
