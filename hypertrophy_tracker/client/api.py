"""Thin REST client for the tracker API."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

import httpx

API_PREFIX = "/api/v1"


class TrackerClient:
    """Synchronous REST client. Every method raises ``httpx.HTTPStatusError`` on 4xx/5xx
    and lets ``httpx.TransportError`` through for callers that fall back to offline mode.

    ``http`` may be any ``httpx.Client`` (e.g. FastAPI's ``TestClient``); when omitted a
    client for ``base_url`` is created and owned by this instance.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        token: str | None = None,
        http: httpx.Client | None = None,
        timeout: float = 10.0,
        api_prefix: str = API_PREFIX,
    ) -> None:
        self._owns_http = http is None
        self.http = http if http is not None else httpx.Client(base_url=base_url.rstrip("/"), timeout=timeout)
        self.api_prefix = api_prefix
        self.token = token

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "TrackerClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        resp = self.http.request(method, f"{self.api_prefix}{path}", headers=headers, **kwargs)
        resp.raise_for_status()
        if resp.status_code == 204:
            return None
        if resp.headers.get("content-type", "").startswith("text/csv"):
            return resp.text
        return resp.json()

    # auth
    def register(self, open_id: str, password: str, name: str | None = None) -> dict:
        data = self._request(
            "POST", "/auth/register", json={"open_id": open_id, "password": password, "name": name}
        )
        self.token = data["access_token"]
        return data["user"]

    def login(self, open_id: str, password: str) -> dict:
        data = self._request("POST", "/auth/login", json={"open_id": open_id, "password": password})
        self.token = data["access_token"]
        return data["user"]

    def logout(self) -> None:
        self._request("POST", "/auth/logout")
        self.token = None

    def me(self) -> dict:
        return self._request("GET", "/auth/me")

    # workout plan
    def get_days(self) -> list[dict]:
        return self._request("GET", "/workout/days")

    def get_exercises(self, day_id: int) -> list[dict]:
        return self._request("GET", f"/workout/days/{day_id}/exercises")

    def get_vacation_days(self) -> list[dict]:
        return self._request("GET", "/workout/vacation/days")

    def get_vacation_exercises(self, day_id: int) -> list[dict]:
        return self._request("GET", f"/workout/vacation/days/{day_id}/exercises")

    # progress
    def create_session(
        self,
        workout_day_id: int,
        session_date: datetime,
        notes: str | None = None,
        client_session_key: str | None = None,
    ) -> int:
        data = self._request(
            "POST",
            "/progress/sessions",
            json={
                "workout_day_id": workout_day_id,
                "session_date": session_date.isoformat(),
                "notes": notes,
                "client_session_key": client_session_key,
            },
        )
        return data["session_id"]

    def log_exercise(self, session_id: int, **entry: Any) -> dict:
        return self._request("POST", "/progress/logs", json={"session_id": session_id, **entry})

    def get_sessions(self, limit: int = 10) -> list[dict]:
        return self._request("GET", "/progress/sessions", params={"limit": limit})

    def get_session_logs(self, session_id: int) -> list[dict]:
        return self._request("GET", f"/progress/sessions/{session_id}/logs")

    def get_exercise_progress(self, exercise_id: int) -> list[dict]:
        return self._request("GET", f"/progress/exercises/{exercise_id}")

    def get_last_weights(self) -> dict[int, dict]:
        data = self._request("GET", "/progress/last-weights")
        return {int(k): v for k, v in data.items()}

    def compare_session(self, session_id: int) -> dict:
        return self._request("GET", f"/progress/sessions/{session_id}/comparison")

    def sync_pending(self, payload: dict) -> dict:
        return self._request("POST", "/progress/sync", json=payload)

    def export_csv(self) -> str:
        return self._request("GET", "/progress/export.csv")

    # meals
    def create_meal(self, **meal: Any) -> dict:
        return self._request("POST", "/meals", json=meal)

    def get_meals(self, day: date) -> list[dict]:
        return self._request("GET", "/meals", params={"date": day.isoformat()})

    def get_meal_summary(self, day: date) -> dict:
        return self._request("GET", "/meals/summary", params={"date": day.isoformat()})

    def delete_meal(self, meal_id: int) -> None:
        self._request("DELETE", f"/meals/{meal_id}")

    # body progress
    def create_progress_log(self, **log: Any) -> dict:
        return self._request("POST", "/body/logs", json=log)

    def get_progress_logs(self, limit: int = 50) -> list[dict]:
        return self._request("GET", "/body/logs", params={"limit": limit})

    def delete_progress_log(self, log_id: int) -> None:
        self._request("DELETE", f"/body/logs/{log_id}")

    # reminders
    def get_reminders(self) -> list[dict]:
        return self._request("GET", "/reminders")

    def create_reminder(self, **reminder: Any) -> dict:
        return self._request("POST", "/reminders", json=reminder)

    def update_reminder(self, reminder_id: int, **changes: Any) -> dict:
        return self._request("PATCH", f"/reminders/{reminder_id}", json=changes)

    def delete_reminder(self, reminder_id: int) -> None:
        self._request("DELETE", f"/reminders/{reminder_id}")

    def get_due_reminders(self, at: str) -> list[dict]:
        return self._request("GET", "/reminders/due", params={"at": at})
