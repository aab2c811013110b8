import pytest

from conftest import API, register


@pytest.fixture
async def plan(client):
    day = (await client.get(f"{API}/workout/days")).json()[0]
    exercises = (await client.get(f"{API}/workout/days/{day['id']}/exercises")).json()
    return day["id"], [e["id"] for e in exercises]


async def start_session(client, headers, day_id, when, **extra):
    resp = await client.post(
        f"{API}/progress/sessions",
        json={"workout_day_id": day_id, "session_date": when, **extra},
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["session_id"]


async def log_set(client, headers, session_id, exercise_id, set_number, reps, weight, **extra):
    resp = await client.post(
        f"{API}/progress/logs",
        json={
            "session_id": session_id,
            "exercise_id": exercise_id,
            "set_number": set_number,
            "reps": reps,
            "weight": weight,
            **extra,
        },
        headers=headers,
    )
    assert resp.status_code == 200, resp.text
    return resp.json()


async def test_exercise_progress_single_day(client, auth_headers, plan):
    day_id, exercises = plan
    sid = await start_session(client, auth_headers, day_id, "2024-03-04T18:00:00Z")
    for n, reps in enumerate([8, 7, 6], start=1):
        body = await log_set(client, auth_headers, sid, exercises[1], n, reps, 60, rir=2)
        assert body["success"] is True

    resp = await client.get(f"{API}/progress/exercises/{exercises[1]}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json() == [
        {"date": "2024-03-04", "max_weight": 60, "total_volume": 1260, "set_count": 3}
    ]


async def test_exercise_progress_without_logs(client, auth_headers, plan):
    _, exercises = plan

    resp = await client.get(f"{API}/progress/exercises/{exercises[0]}", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.json() == []


async def test_last_weights(client, auth_headers, plan):
    day_id, exercises = plan
    assert (await client.get(f"{API}/progress/last-weights", headers=auth_headers)).json() == {}

    first = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")
    await log_set(client, auth_headers, first, exercises[1], 1, 10, 50)
    second = await start_session(client, auth_headers, day_id, "2024-01-15T10:00:00Z")
    await log_set(client, auth_headers, second, exercises[1], 1, 8, 55)

    resp = await client.get(f"{API}/progress/last-weights", headers=auth_headers)

    last = resp.json()[str(exercises[1])]
    assert last["weight"] == 55
    assert last["reps"] == 8
    assert last["date"].startswith("2024-01-15")


async def test_sessions_are_listed_newest_first(client, auth_headers, plan):
    day_id, _ = plan
    old = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")
    new = await start_session(client, auth_headers, day_id, "2024-02-01T10:00:00Z", notes="felt strong")

    sessions = (await client.get(f"{API}/progress/sessions", headers=auth_headers)).json()
    assert [s["id"] for s in sessions] == [new, old]
    assert sessions[0]["notes"] == "felt strong"

    limited = await client.get(f"{API}/progress/sessions?limit=1", headers=auth_headers)
    assert [s["id"] for s in limited.json()] == [new]


async def test_replayed_set_is_stored_once(client, auth_headers, plan):
    day_id, exercises = plan
    sid = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")

    first = await log_set(client, auth_headers, sid, exercises[0], 1, 10, 20, idempotency_key="k-1")
    again = await log_set(client, auth_headers, sid, exercises[0], 1, 10, 20, idempotency_key="k-1")

    assert first["duplicate"] is False
    assert again["duplicate"] is True
    assert again["log_id"] == first["log_id"]
    logs = (await client.get(f"{API}/progress/sessions/{sid}/logs", headers=auth_headers)).json()
    assert len(logs) == 1


async def test_sets_without_key_are_appended(client, auth_headers, plan):
    day_id, exercises = plan
    sid = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")

    await log_set(client, auth_headers, sid, exercises[0], 1, 10, 20)
    await log_set(client, auth_headers, sid, exercises[0], 1, 10, 20)

    logs = (await client.get(f"{API}/progress/sessions/{sid}/logs", headers=auth_headers)).json()
    assert len(logs) == 2


async def test_client_session_key_reuses_session(client, auth_headers, plan):
    day_id, _ = plan
    a = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z", client_session_key="abc")
    b = await start_session(client, auth_headers, day_id, "2024-01-01T10:05:00Z", client_session_key="abc")

    assert a == b


async def test_validation_and_missing_references(client, auth_headers, plan):
    day_id, exercises = plan
    resp = await client.post(
        f"{API}/progress/sessions",
        json={"workout_day_id": 9999, "session_date": "2024-01-01T10:00:00Z"},
        headers=auth_headers,
    )
    assert resp.status_code == 404

    sid = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")
    bad_set = await client.post(
        f"{API}/progress/logs",
        json={"session_id": sid, "exercise_id": exercises[0], "set_number": 0, "reps": 5, "weight": 20},
        headers=auth_headers,
    )
    assert bad_set.status_code == 422

    unknown_exercise = await client.post(
        f"{API}/progress/logs",
        json={"session_id": sid, "exercise_id": 99999, "set_number": 1, "reps": 5, "weight": 20},
        headers=auth_headers,
    )
    assert unknown_exercise.status_code == 404


async def test_sessions_are_private(client, auth_headers, plan):
    day_id, exercises = plan
    sid = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")
    other = await register(client, "someone-else")

    logs = await client.get(f"{API}/progress/sessions/{sid}/logs", headers=other)
    assert logs.status_code == 404

    write = await client.post(
        f"{API}/progress/logs",
        json={"session_id": sid, "exercise_id": exercises[0], "set_number": 1, "reps": 5, "weight": 20},
        headers=other,
    )
    assert write.status_code == 404
    assert (await client.get(f"{API}/progress/sessions", headers=other)).json() == []


async def test_compare_with_previous_session(client, auth_headers, plan):
    day_id, exercises = plan
    first = await start_session(client, auth_headers, day_id, "2024-01-01T10:00:00Z")
    await log_set(client, auth_headers, first, exercises[1], 1, 10, 50)
    second = await start_session(client, auth_headers, day_id, "2024-01-08T10:00:00Z")
    await log_set(client, auth_headers, second, exercises[1], 1, 10, 55)

    resp = await client.get(f"{API}/progress/sessions/{second}/comparison", headers=auth_headers)

    assert resp.status_code == 200
    body = resp.json()
    assert body["previous_session_id"] == first
    [row] = body["exercises"]
    assert row["exercise_id"] == exercises[1]
    assert row["weight_diff"] == 5
    assert row["volume_diff"] == 50

    earliest = await client.get(f"{API}/progress/sessions/{first}/comparison", headers=auth_headers)
    assert earliest.json()["previous_session_id"] is None
    assert earliest.json()["exercises"][0]["previous_max_weight"] == 0
