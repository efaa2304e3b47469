"""Error types and handling helpers for the products API."""
from typing import Any, Dict
import logging

logger = logging.getLogger(__name__)


class InvocationError(Exception):
    """Raised when a collaborator does not expose a capability the caller needs."""

    def __init__(self, target: Any, capability: str):
        self.target_type = type(target).__name__
        self.capability = capability
        super().__init__(f"{self.target_type} does not support '{capability}'")


class ErrorHandler:
    def handle_exception(self, exc: Exception, context: Dict[str, Any] = None) -> Dict[str, Any]:
        logger.error("Unhandled exception while handling request: %s", exc, exc_info=exc)
        return {
            "message": "An internal error occurred while processing your request. Please try again later.",
            "fallback": True,
            "metadata": {"error": str(exc), "context": context or {}},
        }
