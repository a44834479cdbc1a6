import logging
import pathlib
import sys

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.infrastructure import logging_setup
from app.infrastructure.logging_setup import configure_logging


def test_configure_logging_replaces_its_own_handler():
    root = logging.getLogger()
    previous_level = root.level
    other = logging.NullHandler()
    root.addHandler(other)
    try:
        configure_logging("debug")
        first = logging_setup._handler
        configure_logging("warning")
        second = logging_setup._handler

        assert first not in root.handlers
        assert second in root.handlers
        assert other in root.handlers
        assert root.level == logging.WARNING
    finally:
        root.removeHandler(other)
        if logging_setup._handler is not None:
            root.removeHandler(logging_setup._handler)
            logging_setup._handler = None
        root.setLevel(previous_level)
