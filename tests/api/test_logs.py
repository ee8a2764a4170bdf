"""Exercise log retrieval — date range, limit, and count semantics."""

from uuid import uuid4

import pytest


@pytest.fixture
async def user_with_log(create_user, add_exercise):
    user = await create_user("alice")
    for day, description in (
        ("2024-01-01", "run"), ("2024-01-02", "swim"), ("2024-01-03", "bike"),
    ):
        res = await add_exercise(user["_id"], description=description, date=day)
        assert res.status_code == 201
    return user


async def test_log_returns_all_entries(client, user_with_log):
    res = await client.get(f"/api/users/{user_with_log['_id']}/logs")
    assert res.status_code == 200
    body = res.json()
    assert body["_id"] == user_with_log["_id"]
    assert body["username"] == "alice"
    assert body["count"] == 3
    assert [e["date"] for e in body["log"]] == [
        "Mon Jan 01 2024", "Tue Jan 02 2024", "Wed Jan 03 2024",
    ]
    assert set(body["log"][0]) == {"description", "duration", "date"}


async def test_from_excludes_earlier_exercises(client, user_with_log):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs", params={"from": "2024-01-02"},
    )
    body = res.json()
    assert body["count"] == 2
    assert "Mon Jan 01 2024" not in [e["date"] for e in body["log"]]


async def test_range_is_inclusive(client, user_with_log):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs",
        params={"from": "2024-01-02", "to": "2024-01-02"},
    )
    body = res.json()
    assert body["count"] == 1
    assert body["log"][0]["description"] == "swim"


async def test_default_to_excludes_future_dates(client, create_user, add_exercise):
    user = await create_user("alice")
    await add_exercise(user["_id"], date="2999-01-01")
    await add_exercise(user["_id"], date="2024-01-01")

    res = await client.get(f"/api/users/{user['_id']}/logs")
    assert res.json()["count"] == 1


async def test_limit_caps_entries_and_count(client, user_with_log):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs", params={"limit": "1"},
    )
    body = res.json()
    assert body["count"] == 1
    assert len(body["log"]) == 1


@pytest.mark.parametrize("limit", ["0", "abc", ""])
async def test_non_positive_or_invalid_limit_is_unlimited(
    client, user_with_log, limit,
):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs", params={"limit": limit},
    )
    assert res.json()["count"] == 3


async def test_log_only_contains_own_exercises(
    client, user_with_log, create_user, add_exercise,
):
    other = await create_user("bob")
    await add_exercise(other["_id"], date="2024-01-01")

    res = await client.get(f"/api/users/{user_with_log['_id']}/logs")
    assert res.json()["count"] == 3


async def test_log_for_unknown_user_returns_404(client):
    res = await client.get(f"/api/users/{uuid4()}/logs")
    assert res.status_code == 404
    assert res.json()["message"] == "User not found!"


async def test_log_for_user_without_exercises_is_empty(client, create_user):
    user = await create_user("alice")
    res = await client.get(f"/api/users/{user['_id']}/logs")
    assert res.status_code == 200
    assert res.json()["count"] == 0
    assert res.json()["log"] == []


async def test_negative_limit_caps_by_magnitude(client, user_with_log):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs", params={"limit": "-2"},
    )
    assert res.json()["count"] == 2


async def test_huge_limit_returns_every_entry(client, user_with_log):
    res = await client.get(
        f"/api/users/{user_with_log['_id']}/logs", params={"limit": "1e20"},
    )
    assert res.status_code == 200
    assert res.json()["count"] == 3
