"""
Mock response sinks.

These sinks record what a controller emitted without touching any transport.
They are used when:
- Unit-testing controllers without starting the web app
- Asserting on the exact payload a controller produced

Important:
- Mock sinks must follow the SAME interface as the real HTTP sinks
  (see products_api/integrations/contracts/interfaces.py).
"""

from .response_recorder import ResponseRecorder

__all__ = ["ResponseRecorder"]
