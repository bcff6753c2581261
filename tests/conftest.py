import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging() installs root handlers; drop them after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
