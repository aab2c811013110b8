from datetime import datetime, timedelta, timezone

import httpx
import pytest

from conftest import refuse_connection
from hypertrophy_tracker.client import (
    PendingLogStore,
    SessionLogger,
    TrackerClient,
    poll_due_reminders,
    watch_reminders,
)
from hypertrophy_tracker.core.enums import SessionLoggerState
from hypertrophy_tracker.schemas.workout import PendingLog


@pytest.fixture
def online(sync_client):
    client = TrackerClient(http=sync_client)
    client.register("offline-lifter", "hunter2hunter2")
    return client


@pytest.fixture
def offline(online):
    http = httpx.Client(transport=httpx.MockTransport(refuse_connection), base_url="http://offline")
    yield TrackerClient(http=http, token=online.token)
    http.close()


@pytest.fixture
def plan(online):
    day = online.get_days()[0]
    return day["id"], [e["id"] for e in online.get_exercises(day["id"])]


@pytest.fixture
def store(tmp_path):
    return PendingLogStore(tmp_path / "pending")


def test_online_session(online, store, plan):
    day_id, exercises = plan
    logger = SessionLogger(online, store)

    assert logger.start(day_id) is SessionLoggerState.ACTIVE_ONLINE
    assert logger.log_set(exercises[0], 1, 10, 40, rir=2) is True

    assert store.pending_keys() == []
    assert len(online.get_session_logs(logger.session_id)) == 1


def test_two_offline_sessions_keep_separate_buffers(online, offline, store, plan):
    day_id, exercises = plan
    logger = SessionLogger(offline, store)

    assert logger.start(day_id) is SessionLoggerState.ACTIVE_OFFLINE
    first_key = logger.session_key
    assert logger.log_set(exercises[0], 1, 10, 40) is False
    assert logger.log_set(exercises[0], 2, 9, 40) is False
    logger.finish()

    logger.start(day_id)
    second_key = logger.session_key
    logger.log_set(exercises[1], 1, 8, 60)

    assert sorted(store.pending_keys()) == sorted([first_key, second_key])
    assert len(store.load(first_key).logs) == 2
    assert len(store.load(second_key).logs) == 1

    logger.client = online
    results = logger.sync()

    assert set(results) == {first_key, second_key}
    assert store.pending_keys() == []
    assert logger.state is SessionLoggerState.ACTIVE_ONLINE
    assert logger.session_id == results[second_key]["session_id"]
    assert len(online.get_sessions()) == 2
    assert len(online.get_session_logs(results[first_key]["session_id"])) == 2


def test_network_loss_mid_session(online, offline, store, plan):
    day_id, exercises = plan
    logger = SessionLogger(online, store)
    logger.start(day_id)
    session_id = logger.session_id
    logger.log_set(exercises[0], 1, 10, 40)

    logger.client = offline
    assert logger.log_set(exercises[0], 2, 10, 40) is False
    assert logger.state is SessionLoggerState.ACTIVE_OFFLINE
    assert store.load(logger.session_key).session_id == session_id

    logger.client = online
    result = logger.sync()[logger.session_key]

    assert result["session_id"] == session_id
    assert result["session_created"] is False
    assert [log["set_number"] for log in online.get_session_logs(session_id)] == [1, 2]
    assert logger.log_set(exercises[0], 3, 10, 40) is True


def test_failed_sync_keeps_buffer(online, offline, store, plan):
    day_id, exercises = plan
    logger = SessionLogger(offline, store)
    logger.start(day_id)
    logger.log_set(exercises[0], 1, 10, 40)

    assert logger.sync() == {}
    assert store.pending_keys() == [logger.session_key]

    # a replay after a partial success is absorbed by the idempotency keys
    logger.client = online
    payload = store.load(logger.session_key).to_sync_request().model_dump(mode="json")
    online.sync_pending(payload)
    result = logger.sync()[logger.session_key]
    assert result["duplicates"] == 1
    assert result["logged"] == 0


def test_log_before_start_is_an_error(online, store):
    with pytest.raises(RuntimeError):
        SessionLogger(online, store).log_set(1, 1, 10, 40)


def test_store_never_overwrites_a_buffer(store):
    store.open("abc", workout_day_id=1)
    store.append(
        "abc",
        PendingLog(
            exercise_id=1, set_number=1, reps=5, weight=50, idempotency_key="k", logged_at=datetime(2024, 1, 1)
        ),
    )

    reopened = store.open("abc", workout_day_id=2)

    assert reopened.workout_day_id == 1
    assert len(reopened.logs) == 1
    assert list(store.root.glob("*.tmp")) == []
    with pytest.raises(ValueError):
        store.open("../escape", workout_day_id=1)


def test_reminder_polling(online):
    seen = []

    due = poll_due_reminders(online, seen.append, now=datetime(2024, 6, 1, 17, 30))

    assert sorted(r["slug"] for r in due) == ["caffeine", "citrulline"]
    assert seen == due

    sleeps = []
    watch_reminders(online, seen.append, interval=60, iterations=2, sleep=sleeps.append)
    assert sleeps == [60]


def test_client_errors_are_raised(online):
    with pytest.raises(httpx.HTTPStatusError):
        online.get_session_logs(424242)


def test_reminder_watch_survives_server_errors():
    calls = []

    def unavailable(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(503, json={"detail": "Database not available"})

    http = httpx.Client(transport=httpx.MockTransport(unavailable), base_url="http://tracker")
    client = TrackerClient(http=http, token="t")
    seen, sleeps = [], []

    watch_reminders(client, seen.append, interval=60, iterations=3, sleep=sleeps.append)

    assert calls == ["/api/v1/reminders/due"] * 3
    assert seen == []
    assert sleeps == [60, 60]
    http.close()


def test_pending_keys_follow_session_start_not_last_write(store):
    t0 = datetime(2024, 5, 1, 7, 0, tzinfo=timezone.utc)
    store.open("zzz-older", workout_day_id=1, started_at=t0)
    store.open("aaa-newer", workout_day_id=1, started_at=t0 + timedelta(hours=1))

    store.append(
        "zzz-older",
        PendingLog(
            exercise_id=1, set_number=1, reps=5, weight=50, idempotency_key="late", logged_at=t0 + timedelta(hours=2)
        ),
    )

    assert store.pending_keys() == ["zzz-older", "aaa-newer"]
