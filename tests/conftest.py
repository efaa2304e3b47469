"""Pytest fixtures for controller and response sink tests."""

import pytest

from products_api.controllers.products_controller import ProductsController
from products_api.integrations.clients.mocks.response_recorder import ResponseRecorder


@pytest.fixture
def controller():
    return ProductsController()


@pytest.fixture
def recorder():
    """Fresh recording sink for each test."""
    return ResponseRecorder()
