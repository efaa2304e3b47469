"""Controller for the product listing endpoint.

The controller never builds a framework response itself: it hands its payload
to the ResponseSink it is given, which is a JSONResponseSink under FastAPI and
a ResponseRecorder in unit tests.
"""
from typing import Any, Tuple
import logging

from products_api.error_handler import InvocationError
from products_api.integrations.contracts.interfaces import Product, ResponseSink

logger = logging.getLogger(__name__)

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(name="Default product", description="product description", price=100),
)


class ProductsController:
    """Handles product listing requests independently of the HTTP transport."""

    def list_products(self, request: Any, response: ResponseSink) -> None:
        """Emit the default product list to `response` once; `request` is unused."""
        emit = getattr(response, "emit", None)
        if not callable(emit):
            raise InvocationError(response, "emit")

        logger.info("Listing %d product(s)", len(DEFAULT_PRODUCTS))
        emit(list(DEFAULT_PRODUCTS))
