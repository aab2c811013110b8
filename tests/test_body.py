from conftest import API, register


async def test_progress_log_crud(client, auth_headers):
    for day, weight in (("2024-01-01", 80.5), ("2024-02-01", 78.2)):
        resp = await client.post(
            f"{API}/body/logs",
            json={"log_date": f"{day}T07:00:00Z", "body_weight": weight, "waist": 84.0},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.text

    logs = (await client.get(f"{API}/body/logs", headers=auth_headers)).json()
    assert [log["body_weight"] for log in logs] == [78.2, 80.5]
    assert logs[0]["waist"] == 84.0
    assert logs[0]["photo_front_url"] is None

    other = await register(client, "someone-else")
    assert (await client.delete(f"{API}/body/logs/{logs[0]['id']}", headers=other)).status_code == 404

    assert (await client.delete(f"{API}/body/logs/{logs[0]['id']}", headers=auth_headers)).status_code == 204
    remaining = (await client.get(f"{API}/body/logs", headers=auth_headers)).json()
    assert [log["id"] for log in remaining] == [logs[1]["id"]]


async def test_body_weight_bounds(client, auth_headers):
    resp = await client.post(
        f"{API}/body/logs", json={"log_date": "2024-01-01T07:00:00Z", "body_weight": 5}, headers=auth_headers
    )

    assert resp.status_code == 422
