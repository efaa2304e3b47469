"""
JSON Response Sink (Real HTTP).

Purpose:
- Turns whatever a controller emits into a FastAPI JSONResponse.
- Used by the routers in products_api/api/*; the route returns `sink.response`.

If the controller never emitted anything, `response` is an empty 204.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, Response

from products_api.integrations.contracts.interfaces import ResponseSink

logger = logging.getLogger(__name__)


class JSONResponseSink(ResponseSink):
    def __init__(self, status_code: int = status.HTTP_200_OK):
        self.status_code = status_code
        self._response: Optional[JSONResponse] = None

    def emit(self, payload: Any) -> None:
        if self._response is not None:
            logger.warning("JSONResponseSink emitted more than once; keeping the latest payload")
        self._response = JSONResponse(content=jsonable_encoder(payload), status_code=self.status_code)

    @property
    def emitted(self) -> bool:
        return self._response is not None

    @property
    def response(self) -> Response:
        if self._response is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        return self._response
