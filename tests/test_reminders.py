import asyncio

from conftest import API


async def test_defaults_are_seeded_once(client, auth_headers):
    first = (await client.get(f"{API}/reminders", headers=auth_headers)).json()
    second = (await client.get(f"{API}/reminders", headers=auth_headers)).json()

    assert [r["slug"] for r in first] == ["creatine", "citrulline", "caffeine", "restore"]
    assert [r["time"] for r in first] == ["07:30", "17:30", "17:30", "23:00"]
    assert [r["id"] for r in second] == [r["id"] for r in first]


async def test_due_reminders_match_the_minute(client, auth_headers):
    due = (await client.get(f"{API}/reminders/due?at=17:30", headers=auth_headers)).json()
    assert sorted(r["slug"] for r in due) == ["caffeine", "citrulline"]

    assert (await client.get(f"{API}/reminders/due?at=17:31", headers=auth_headers)).json() == []
    assert (await client.get(f"{API}/reminders/due?at=25:00", headers=auth_headers)).status_code == 422


async def test_disabled_reminder_is_never_due(client, auth_headers):
    reminders = (await client.get(f"{API}/reminders", headers=auth_headers)).json()
    creatine = next(r for r in reminders if r["slug"] == "creatine")

    resp = await client.patch(f"{API}/reminders/{creatine['id']}", json={"enabled": False}, headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["enabled"] is False
    assert resp.json()["time"] == "07:30"

    assert (await client.get(f"{API}/reminders/due?at=07:30", headers=auth_headers)).json() == []


async def test_create_and_delete(client, auth_headers):
    payload = {"slug": "omega-3", "time": "13:00", "supplement": "Omega 3", "dose": "2 cápsulas"}

    created = await client.post(f"{API}/reminders", json=payload, headers=auth_headers)
    assert created.status_code == 201
    assert (await client.post(f"{API}/reminders", json=payload, headers=auth_headers)).status_code == 409

    rid = created.json()["id"]
    assert (await client.delete(f"{API}/reminders/{rid}", headers=auth_headers)).status_code == 204
    assert (await client.delete(f"{API}/reminders/{rid}", headers=auth_headers)).status_code == 404


async def test_deleted_reminders_stay_deleted(client, auth_headers):
    reminders = (await client.get(f"{API}/reminders", headers=auth_headers)).json()
    for r in reminders:
        resp = await client.delete(f"{API}/reminders/{r['id']}", headers=auth_headers)
        assert resp.status_code == 204

    assert (await client.get(f"{API}/reminders", headers=auth_headers)).json() == []
    assert (await client.get(f"{API}/reminders/due?at=17:30", headers=auth_headers)).json() == []
    assert (await client.get(f"{API}/reminders", headers=auth_headers)).json() == []


async def test_concurrent_first_reads_do_not_conflict(client, auth_headers):
    responses = await asyncio.gather(
        client.get(f"{API}/reminders/due?at=07:30", headers=auth_headers),
        client.get(f"{API}/reminders/due?at=07:30", headers=auth_headers),
    )

    assert [r.status_code for r in responses] == [200, 200]
    assert (await client.get(f"{API}/reminders", headers=auth_headers)).json()[0]["slug"] == "creatine"
