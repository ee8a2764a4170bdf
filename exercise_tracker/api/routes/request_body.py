"""Request Body Helpers — read JSON or HTML-form bodies into plain dicts.

Invariants:
    - application/json bodies must decode, otherwise MalformedBodyError (400)
    - Form bodies (urlencoded, multipart) are read as flat str -> str dicts
    - Empty or unknown-content-type bodies read as {}
    - A JSON body that is not an object reads as {}

Design Decisions:
    - Parsed by hand instead of typed Body params: the landing page posts forms while
      API clients post JSON to the same endpoints
"""

import json
import logging

from fastapi import Request

from exercise_tracker.core.errors import MalformedBodyError

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> dict:
    """FastAPI dependency: the request body as a dict, whatever its encoding."""
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if "json" in content_type:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(
                f"Undecodable JSON body on {request.url.path}: {e}",
                extra={"path": request.url.path},
            )
            raise MalformedBodyError()
        return data if isinstance(data, dict) else {}

    return {}
