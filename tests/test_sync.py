import pytest

from conftest import API


@pytest.fixture
async def plan(client):
    day = (await client.get(f"{API}/workout/days")).json()[1]
    exercises = (await client.get(f"{API}/workout/days/{day['id']}/exercises")).json()
    return day["id"], [e["id"] for e in exercises]


def buffer(key, day_id, exercise_id, **extra):
    return {
        "client_session_key": key,
        "workout_day_id": day_id,
        "logs": [
            {
                "exercise_id": exercise_id,
                "set_number": n,
                "reps": 10,
                "weight": 40,
                "idempotency_key": f"{key}-{n}",
                "logged_at": f"2024-05-01T07:{30 + n}:00Z",
            }
            for n in (1, 2)
        ],
        **extra,
    }


async def test_sync_creates_session_dated_at_first_set(client, auth_headers, plan):
    day_id, exercises = plan

    resp = await client.post(f"{API}/progress/sync", json=buffer("buf-1", day_id, exercises[0]), headers=auth_headers)

    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["session_created"] is True
    assert body["logged"] == 2
    assert body["duplicates"] == 0
    [session] = (await client.get(f"{API}/progress/sessions", headers=auth_headers)).json()
    assert session["id"] == body["session_id"]
    assert session["session_date"].startswith("2024-05-01T07:31")


async def test_replaying_a_buffer_does_not_duplicate(client, auth_headers, plan):
    day_id, exercises = plan
    payload = buffer("buf-1", day_id, exercises[0])

    first = (await client.post(f"{API}/progress/sync", json=payload, headers=auth_headers)).json()
    second = (await client.post(f"{API}/progress/sync", json=payload, headers=auth_headers)).json()

    assert second["session_id"] == first["session_id"]
    assert second["session_created"] is False
    assert second["logged"] == 0
    assert second["duplicates"] == 2
    logs = await client.get(f"{API}/progress/sessions/{first['session_id']}/logs", headers=auth_headers)
    assert len(logs.json()) == 2


async def test_sync_into_known_session(client, auth_headers, plan):
    day_id, exercises = plan
    created = await client.post(
        f"{API}/progress/sessions",
        json={"workout_day_id": day_id, "session_date": "2024-05-01T07:00:00Z"},
        headers=auth_headers,
    )
    sid = created.json()["session_id"]

    resp = await client.post(
        f"{API}/progress/sync",
        json=buffer("buf-2", day_id, exercises[0], session_id=sid),
        headers=auth_headers,
    )

    assert resp.json() == {"session_id": sid, "session_created": False, "logged": 2, "duplicates": 0}


async def test_sync_with_unknown_exercise_writes_nothing(client, auth_headers, plan):
    day_id, _ = plan

    resp = await client.post(f"{API}/progress/sync", json=buffer("buf-3", day_id, 99999), headers=auth_headers)

    assert resp.status_code == 404
    assert (await client.get(f"{API}/progress/sessions", headers=auth_headers)).json() == []


async def test_buffered_sets_require_idempotency_key(client, auth_headers, plan):
    day_id, exercises = plan
    payload = buffer("buf-4", day_id, exercises[0])
    del payload["logs"][0]["idempotency_key"]

    resp = await client.post(f"{API}/progress/sync", json=payload, headers=auth_headers)

    assert resp.status_code == 422
