"""
Real HTTP response sinks.

These sinks forward an emitted payload to a real HTTP response.

Important:
- Must implement the same interface as the mock sinks
- Must accept payloads shaped according to products_api/integrations/contracts/*

Switching:
The selection of mock vs real sinks happens in the caller only
(products_api/api/products_router.py for HTTP).
"""

from .json_response_sink import JSONResponseSink

__all__ = ["JSONResponseSink"]
