from __future__ import annotations

import json
from dataclasses import FrozenInstanceError, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

import httpx
from fastapi.responses import JSONResponse

from httperror.core.config import get_settings
from httperror.core.logging import get_logger

log = get_logger("httperror.errors")


class ErrorName(str, Enum):
    HTTP_ERROR = "HttpError"
    MISSING_FIELD = "MissingFieldError"


class SuccessfulResponseError(ValueError):
    """Raised when asked to build an HttpError from a 2xx response."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Cannot create HttpError from a successful response (status: {status})")
        self.status = status


@dataclass(eq=False)
class HttpError(Exception):
    """An HTTP-style error that can be raised, serialized and rebuilt from a response.

    Notes:
      - `status` is never validated; whatever is given is what gets sent.
      - `name` identifies the variant without isinstance checks.
    """

    status: int
    message: str
    details: Optional[Mapping[str, Any]] = None
    headers: Optional[Mapping[str, str]] = None
    name: ErrorName = ErrorName.HTTP_ERROR

    def __post_init__(self) -> None:
        # Own read-only copies; callers keep their dicts.
        if self.details is not None:
            object.__setattr__(self, "details", MappingProxyType(dict(self.details)))
        if self.headers is not None:
            object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))
        Exception.__init__(self, self.message)

    def __setattr__(self, key: str, value: Any) -> None:
        # Fields are set once; exception attributes like __traceback__ stay writable.
        if key in self.__dataclass_fields__ and key in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {key!r}")
        super().__setattr__(key, value)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        body.update(self.details or {})
        # The message owns the "error" slot even if details carries one.
        body["error"] = self.message
        return body

    def to_response(self) -> JSONResponse:
        headers: Dict[str, str] = {"content-type": get_settings().CONTENT_TYPE}
        for key, value in (self.headers or {}).items():
            for existing in [k for k in headers if k.lower() == key.lower()]:
                del headers[existing]
            headers[key] = value
        return JSONResponse(content=self.to_dict(), status_code=self.status, headers=headers)

    @classmethod
    async def from_response(cls, response: httpx.Response) -> "HttpError":
        status = response.status_code
        if 200 <= status < 300:
            raise SuccessfulResponseError(status)

        message = response.reason_phrase or get_settings().FALLBACK_MESSAGE
        details: Optional[Dict[str, Any]] = None

        # Buffer once; JSON and text are both decoded from these bytes.
        try:
            if isinstance(response.stream, httpx.AsyncByteStream):
                raw = await response.aread()
            else:
                raw = response.read()
        except (httpx.HTTPError, httpx.StreamError, RuntimeError) as e:
            log.warning("failed to read response body: %s", e, extra={"status": status})
            raw = b""

        try:
            body = json.loads(raw)
        except (ValueError, RecursionError):
            text = _decode_text(response, raw)
            if text:
                message = text
        else:
            if isinstance(body, dict):
                if isinstance(body.get("error"), str):
                    message = body["error"]
                details = body

        return cls(status=status, message=message, details=details)


def _decode_text(response: httpx.Response, raw: bytes) -> str:
    encoding = response.encoding or "utf-8"
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        log.warning("failed to parse response body: %s", e, extra={"status": response.status_code})
        return ""


def missing_field_error(field_name: str, headers: Optional[Mapping[str, str]] = None) -> HttpError:
    return HttpError(
        status=400,
        message=f"Missing required field: {field_name}",
        details={"field": field_name},
        headers=headers,
        name=ErrorName.MISSING_FIELD,
    )
