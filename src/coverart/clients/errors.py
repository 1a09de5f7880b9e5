"""
Extraction of error details from CoverArt Archive error pages.

The archive reports errors as a small HTML page:

    <!doctype html>
    <html lang=en>
    <title>404 Not Found</title>
    <h1>Not Found</h1>
    <p>No cover art found for release 968db8b7-c519-43e5-bb45-9f244c92b670</p>
"""

import re
from typing import Optional

import requests

from ..core.exceptions import HttpError
from ..core.logger import get_logger

logger = get_logger("clients.errors")

ERROR_PAGE_PATTERN = re.compile(
    r"<title>\s*(\d+)?\s*(.*?)\s*</title>\s*<h1>\s*(.*?)\s*</h1>\s*<p>\s*(.*?)\s*</p>\s*$",
    re.DOTALL,
)


def parse_error_page(status: int, content_type: Optional[str], body: str) -> Optional[HttpError]:
    """
    Build an HttpError from an archive error page.

    Returns:
        None if the body is not an error page
    """
    if not body or not content_type or content_type.split(";")[0].strip() != "text/html":
        return None
    match = ERROR_PAGE_PATTERN.search(body)
    if not match:
        return None
    code, title, heading, message = match.groups()
    if code is not None:
        if int(code) != status:
            logger.debug("Status code mismatch: %s <> %s", code, status)
        status = int(code)
    else:
        logger.debug("Status code missing from error page title")
    if title != heading:
        logger.debug("Title/heading mismatch: %r <> %r", title, heading)
        message = f"{heading}: {message}"
    return HttpError(status, title, message)


def raise_for_status(response: requests.Response) -> None:
    """
    Raise HttpError for an unsuccessful response.

    Raises:
        HttpError: If the response status is 4xx or 5xx
    """
    if response.status_code < 400:
        return
    error = parse_error_page(
        response.status_code,
        response.headers.get("Content-Type"),
        response.text,
    )
    if error is None:
        error = HttpError(response.status_code, response.reason)
    raise error
