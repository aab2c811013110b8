from conftest import API, register


async def test_protected_routes_require_a_token(client):
    for method, path in [
        ("GET", "/progress/sessions"),
        ("GET", "/progress/last-weights"),
        ("GET", "/meals?date=2024-01-01"),
        ("GET", "/reminders"),
        ("GET", "/auth/me"),
    ]:
        resp = await client.request(method, f"{API}{path}")
        assert resp.status_code == 401, path


async def test_invalid_token_is_rejected(client):
    resp = await client.get(f"{API}/auth/me", headers={"Authorization": "Bearer not-a-token"})

    assert resp.status_code == 401


async def test_register_login_me_logout(client):
    headers = await register(client, "ana")

    me = await client.get(f"{API}/auth/me", headers=headers)
    assert me.status_code == 200
    assert me.json()["open_id"] == "ana"
    assert me.json()["role"] == "user"

    login = await client.post(f"{API}/auth/login", json={"open_id": "ana", "password": "hunter2hunter2"})
    assert login.status_code == 200
    token = login.json()["access_token"]

    out = await client.post(f"{API}/auth/logout", headers={"Authorization": f"Bearer {token}"})
    assert out.status_code == 204
    after = await client.get(f"{API}/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert after.status_code == 401
    # the registration token is still valid
    assert (await client.get(f"{API}/auth/me", headers=headers)).status_code == 200


async def test_duplicate_registration_conflicts(client):
    await register(client, "ana")

    resp = await client.post(
        f"{API}/auth/register", json={"open_id": "ana", "password": "another-password"}
    )

    assert resp.status_code == 409


async def test_wrong_password(client):
    await register(client, "ana")

    resp = await client.post(f"{API}/auth/login", json={"open_id": "ana", "password": "wrong-password"})

    assert resp.status_code == 401
