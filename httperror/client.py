from __future__ import annotations

import httpx

from httperror.core.errors import HttpError
from httperror.core.logging import get_logger

log = get_logger("httperror.client")


async def raise_for_error(response: httpx.Response) -> None:
    """Raise the response as an HttpError unless it is 2xx.

    Like `httpx.Response.raise_for_status`, but the raised value carries the
    message and details recovered from the body.
    """
    if response.is_success:
        return
    err = await HttpError.from_response(response)
    log.debug("remote error: %s", err.message, extra={"status": err.status})
    raise err
