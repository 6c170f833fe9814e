from typing import Any, Optional, Protocol

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, PlainTextResponse, Response


class ResponseWriter(Protocol):
    """The slice of an HTTP response a handler writes to."""

    def status(self, code: int) -> "ResponseWriter":
        ...

    def send(self, body: Any) -> None:
        ...


class ResponseCollector:
    """Records one status and one body, then renders a Starlette response."""

    def __init__(self):
        self.status_code = 200
        self.body: Optional[Any] = None
        self.sent = False

    def status(self, code: int) -> "ResponseCollector":
        self.status_code = code
        return self

    def send(self, body: Any) -> None:
        if self.sent:
            raise RuntimeError("Response body already sent")
        self.body = body
        self.sent = True

    def to_response(self) -> Response:
        if not self.sent:
            raise RuntimeError("No response body was sent")
        if isinstance(self.body, str):
            return PlainTextResponse(self.body, status_code=self.status_code)
        body = jsonable_encoder(self.body)
        # a missing author name is left out of the payload
        if isinstance(body, dict) and body.get("author", "") is None:
            del body["author"]
        return JSONResponse(body, status_code=self.status_code)
