"""Plain-text shortening and redirect routes."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from ..request_utils import read_body

router = APIRouter()

logger = logging.getLogger("url_shortener.web")


@router.post("/", status_code=status.HTTP_201_CREATED, response_class=PlainTextResponse)
async def shorten_plain(request: Request):
    """Shorten the URL sent as the raw request body."""
    storage = request.app.state.storage

    try:
        body = await read_body(request)
        short_url = storage.put(body.decode("utf-8"))
    except ValueError as e:
        logger.debug(f"Rejected plain shorten request: {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    return PlainTextResponse(short_url, status_code=status.HTTP_201_CREATED)


@router.get("/{short_code}", status_code=status.HTTP_307_TEMPORARY_REDIRECT)
async def redirect_to_url(request: Request, short_code: str):
    """Redirect to the original URL, or 400 when the code is unknown."""
    storage = request.app.state.storage

    original_url = storage.get(short_code)
    if original_url is None:
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    return RedirectResponse(url=original_url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
