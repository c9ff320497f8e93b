"""Conftest for unit tests - marks every test as unit and provides sample servers."""

import logging

import pytest

from search_server import DocumentStatus, SearchServer


def pytest_collection_modifyitems(config, items):
    """Automatically mark all tests in the unit directory as unit tests."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def pet_server() -> SearchServer:
    """Server loaded with the four-document pet corpus."""
    server = SearchServer("и в на")
    server.add_document(0, "белый кот и модный ошейник", DocumentStatus.ACTUAL, [8, -3])
    server.add_document(1, "пушистый кот пушистый хвост", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "ухоженный пёс выразительные глаза", DocumentStatus.ACTUAL, [5, -12, 2, 1])
    server.add_document(3, "ухоженный скворец евгений", DocumentStatus.BANNED, [9])
    return server


@pytest.fixture
def restore_root_logger():
    """Drop handlers added by configure_logging and restore the root level."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
