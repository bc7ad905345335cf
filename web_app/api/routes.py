"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import Response
from pydantic import ValidationError

from .schemas import ShortenRequest, ShortenResponse
from ..request_utils import read_body

router = APIRouter()

logger = logging.getLogger("url_shortener.web")


@router.post(
    "/shorten",
    status_code=status.HTTP_201_CREATED,
    response_model=ShortenResponse,
    responses={
        400: {"description": "Malformed JSON or empty URL"},
        500: {"description": "Failed to encode response"},
    },
    summary="Create short URL",
    description='Accepts {"url": "..."} and returns {"result": "<short url>"}.',
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ShortenRequest.model_json_schema()}},
            "required": True,
        }
    },
)
async def shorten_url(request: Request):
    """Create a shortened URL from a JSON body."""
    storage = request.app.state.storage

    try:
        body = await read_body(request)
        payload = ShortenRequest.model_validate_json(body)
        short_url = storage.put(payload.url)
    except (ValidationError, ValueError) as e:
        logger.debug(f"Rejected shorten request: {e}")
        return Response(status_code=status.HTTP_400_BAD_REQUEST)

    try:
        content = ShortenResponse(result=short_url).model_dump_json()
    except Exception as e:
        logger.error(f"Failed to encode response: {e}")
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return Response(
        content=content,
        status_code=status.HTTP_201_CREATED,
        media_type="application/json",
    )
