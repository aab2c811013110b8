from conftest import API
from hypertrophy_tracker.core.constants import PLAN_DAY_COUNT, VACATION_PLAN_DAY_COUNT
from hypertrophy_tracker.services.seed import seed_vacation_plan, seed_workout_plan


async def test_days_are_public_and_ordered(client):
    resp = await client.get(f"{API}/workout/days")

    assert resp.status_code == 200
    days = resp.json()
    assert [d["day_number"] for d in days] == list(range(1, PLAN_DAY_COUNT + 1))
    assert days[0]["day_name"] == "Push (Pectoral y HSPU)"


async def test_exercises_follow_order_index(client):
    day_id = (await client.get(f"{API}/workout/days")).json()[0]["id"]

    resp = await client.get(f"{API}/workout/days/{day_id}/exercises")

    assert resp.status_code == 200
    exercises = resp.json()
    assert [e["order_index"] for e in exercises] == list(range(1, len(exercises) + 1))
    assert all(e["workout_day_id"] == day_id for e in exercises)
    assert any(e["is_superset"] for e in exercises)


async def test_unknown_day_has_no_exercises(client):
    resp = await client.get(f"{API}/workout/days/9999/exercises")

    assert resp.status_code == 200
    assert resp.json() == []


async def test_vacation_plan(client):
    days = (await client.get(f"{API}/workout/vacation/days")).json()
    assert len(days) == VACATION_PLAN_DAY_COUNT
    assert days[0]["difficulty"]

    exercises = (await client.get(f"{API}/workout/vacation/days/{days[0]['id']}/exercises")).json()
    assert exercises
    assert all(e["equipment"] for e in exercises)


async def test_seeding_twice_is_a_no_op(db):
    assert await seed_workout_plan(db) == 0
    assert await seed_vacation_plan(db) == 0
