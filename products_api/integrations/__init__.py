"""
Integrations layer.
This package contains the response transports a controller can write to:
- contracts: the ResponseSink interface and the Product data model
- clients/real_http: sinks that forward to a real HTTP response
- clients/mocks: recording sinks used in tests

Key rule:
- Controllers MUST NOT build framework responses directly.
- Controllers call `emit` on the sink they are given.

Switching implementations:
- The selection of mock vs real sinks happens in ONE place per caller
  (the router for HTTP, the test for unit tests).
"""

from .contracts.interfaces import Product, ResponseSink
from .clients.mocks.response_recorder import ResponseRecorder
from .clients.real_http.json_response_sink import JSONResponseSink

__all__ = [
    "Product", "ResponseSink",
    "ResponseRecorder",
    "JSONResponseSink",
]
