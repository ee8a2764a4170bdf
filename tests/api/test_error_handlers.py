"""Error handlers — status codes and bodies for domain and unexpected errors."""

import json

from starlette.requests import Request

from exercise_tracker.api.error_handlers import (
    handle_tracker_error, handle_unexpected_error,
)
from exercise_tracker.core.errors import InternalError, NotFoundError


def _request(path: str = "/api/users") -> Request:
    return Request({
        "type": "http", "method": "GET", "path": path,
        "query_string": b"", "headers": [],
    })


async def test_domain_error_uses_its_status_and_envelope():
    res = await handle_tracker_error(_request(), NotFoundError("User not found!"))
    assert res.status_code == 404
    body = json.loads(res.body)
    assert body["message"] == "User not found!"
    assert body["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_internal_error_maps_to_500():
    res = await handle_tracker_error(
        _request(), InternalError("User creation failed!", "create_user"),
    )
    assert res.status_code == 500
    assert json.loads(res.body)["message"] == "User creation failed!"


async def test_unexpected_error_hides_details():
    res = await handle_unexpected_error(_request(), RuntimeError("secret dsn"))
    assert res.status_code == 500
    body = json.loads(res.body)
    assert body["message"] == "An unexpected error occurred"
    assert "secret dsn" not in res.body.decode()
