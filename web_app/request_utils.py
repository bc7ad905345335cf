"""Request body helpers."""

import gzip
import zlib

from starlette.requests import Request


async def read_body(request: Request) -> bytes:
    """Read the request body, decompressing it when sent with Content-Encoding: gzip.

    Raises:
        ValueError: If the body is declared gzip but cannot be decompressed
    """
    body = await request.body()
    encoding = request.headers.get("content-encoding", "").strip().lower()
    if encoding != "gzip":
        return body
    try:
        return gzip.decompress(body)
    except (OSError, EOFError, zlib.error) as e:
        raise ValueError(f"Invalid gzip body: {e}") from e
