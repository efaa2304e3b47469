from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, Union


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Product:
    name: str
    description: str
    price: Union[int, float]


# ---------------------------------------------------------------------------
# Abstract sink interface
# ---------------------------------------------------------------------------

class ResponseSink(ABC):
    """Every response transport handed to a controller must implement this interface."""

    @abstractmethod
    def emit(self, payload: Sequence[Product]) -> None:
        """Deliver the payload to whoever made the request."""
