"""
Recording Response Sink (Mock).

Purpose:
- Stands in for the real HTTP response while unit-testing controllers.
- Remembers every payload it was given, in call order, so tests can assert on
  whether it was called and with what.

Usage:
    recorder = ResponseRecorder()
    ProductsController().list_products({}, recorder)
    assert recorder.was_called_with([{"name": "Default product", ...}])

Comparison is structural: dataclass instances are compared through their
fields, so a list of Product equals the equivalent list of dicts. Booleans only
match booleans, so True never stands in for a price of 1.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, List, Optional, Set

from products_api.integrations.contracts.interfaces import ResponseSink

logger = logging.getLogger(__name__)


def _to_plain(value: Any, _active: Optional[Set[int]] = None) -> Any:
    """Convert dataclasses and tuples to dicts and lists.

    A container already being converted higher up the same branch is returned
    unchanged, so self-referential payloads terminate.
    """
    if _active is None:
        _active = set()
    if id(value) in _active:
        return value

    _active.add(id(value))
    try:
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return {f.name: _to_plain(getattr(value, f.name), _active) for f in dataclasses.fields(value)}
        if isinstance(value, dict):
            return {k: _to_plain(v, _active) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [_to_plain(v, _active) for v in value]
        return value
    finally:
        _active.discard(id(value))


def _same(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_same(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return a == b


class ResponseRecorder(ResponseSink):
    def __init__(self):
        self.call_count = 0
        self.calls: List[Any] = []

    def emit(self, payload: Any) -> None:
        self.call_count += 1
        self.calls.append(payload)

    def was_called(self) -> bool:
        return self.call_count > 0

    def was_called_with(self, value: Any) -> bool:
        try:
            expected = _to_plain(value)
        except RecursionError:
            logger.debug("Expected value too deeply nested to compare; treating as no match")
            return False
        for arg in self.calls:
            try:
                if _same(_to_plain(arg), expected):
                    return True
            except RecursionError:
                logger.debug("Payload too deeply nested to compare; treating as no match")
        return False

    def reset(self) -> None:
        self.call_count = 0
        self.calls.clear()
