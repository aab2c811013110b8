from conftest import API


async def test_csv_export(client, auth_headers):
    day = (await client.get(f"{API}/workout/days")).json()[0]
    exercise = (await client.get(f"{API}/workout/days/{day['id']}/exercises")).json()[1]
    sid = (
        await client.post(
            f"{API}/progress/sessions",
            json={"workout_day_id": day["id"], "session_date": "2024-03-04T18:00:00Z"},
            headers=auth_headers,
        )
    ).json()["session_id"]
    await client.post(
        f"{API}/progress/logs",
        json={"session_id": sid, "exercise_id": exercise["id"], "set_number": 1, "reps": 8, "weight": 60, "rir": 2},
        headers=auth_headers,
    )

    resp = await client.get(f"{API}/progress/export.csv", headers=auth_headers)

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert "attachment" in resp.headers["content-disposition"]
    assert resp.content.startswith(b"\xef\xbb\xbf")
    lines = resp.content.decode("utf-8-sig").splitlines()
    assert lines[0] == "Date,Workout Day,Exercise,Set,Reps,Weight (kg),RIR,RPE"
    assert lines[1] == f"2024-03-04,{day['day_name']},{exercise['name']},1,8,60,2,"


async def test_csv_export_without_sets_has_only_header(client, auth_headers):
    resp = await client.get(f"{API}/progress/export.csv", headers=auth_headers)

    assert resp.content.decode("utf-8-sig") == "Date,Workout Day,Exercise,Set,Reps,Weight (kg),RIR,RPE\n"
