import pytest
from unittest.mock import MagicMock
from loguru import logger

from multiselect import DropdownItem, MultiSelectController


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QCoreApplication exists for Qt object tests."""
    from PySide6.QtCore import QCoreApplication
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def fruits():
    return [
        DropdownItem(label="Apple", value="apple"),
        DropdownItem(label="Banana", value="banana"),
        DropdownItem(label="apricot", value="apricot"),
    ]


@pytest.fixture
def controller(fruits):
    ctrl = MultiSelectController()
    ctrl.set_items(fruits)
    yield ctrl
    ctrl.dispose()


@pytest.fixture
def listener(controller):
    """MagicMock subscribed to controller changes after setup."""
    handler = MagicMock()
    controller.subscribe(handler)
    return handler


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of formatted messages."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG", format="{level} | {message}")
    yield messages
    logger.remove(handler_id)
