"""Pure aggregation over logged sets: per-date progress, last weight per exercise,
session-vs-session comparison.

Inputs are plain row tuples so these functions can be tested without a database.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from typing import NamedTuple


class SetRow(NamedTuple):
    """One logged set joined with its session."""

    log_id: int
    session_id: int
    session_date: datetime
    exercise_id: int
    set_number: int
    reps: int
    weight: int


def aggregate_progress(rows: Iterable[SetRow]) -> list[dict]:
    """
    Group sets by the calendar date of their session (not by session id) and return
    one point per date, oldest first: max weight, total volume (sum of weight x reps)
    and set count. Two sessions on the same day merge into one point.
    """
    by_date: dict[date, dict] = {}
    for row in rows:
        day = row.session_date.date()
        point = by_date.get(day)
        if point is None:
            point = {"date": day, "max_weight": row.weight, "total_volume": 0, "set_count": 0}
            by_date[day] = point
        point["max_weight"] = max(point["max_weight"], row.weight)
        point["total_volume"] += row.weight * row.reps
        point["set_count"] += 1
    return [by_date[d] for d in sorted(by_date)]


def _recency_key(row: SetRow) -> tuple:
    return (row.session_date, row.session_id, row.set_number, row.log_id)


def pick_last_weights(rows: Iterable[SetRow]) -> dict[int, dict]:
    """
    Most recent set per exercise. Order is (session date, session id, set number,
    log id), all descending, so same-day sessions resolve deterministically.
    """
    latest: dict[int, SetRow] = {}
    for row in sorted(rows, key=_recency_key, reverse=True):
        if row.exercise_id not in latest:
            latest[row.exercise_id] = row
    return {
        exercise_id: {"weight": row.weight, "reps": row.reps, "date": row.session_date}
        for exercise_id, row in latest.items()
    }


def _summarize_by_exercise(logs: Iterable[tuple[int, int, int]]) -> dict[int, tuple[int, int]]:
    """(exercise_id, weight, reps) -> {exercise_id: (max_weight, volume)}."""
    out: dict[int, tuple[int, int]] = {}
    for exercise_id, weight, reps in logs:
        max_w, vol = out.get(exercise_id, (0, 0))
        out[exercise_id] = (max(max_w, weight), vol + weight * reps)
    return out


def compare_logs(
    current: Iterable[tuple[int, int, int]],
    previous: Iterable[tuple[int, int, int]],
    exercise_names: dict[int, str] | None = None,
) -> list[dict]:
    """Per exercise of the current session: max weight and volume vs the previous session."""
    names = exercise_names or {}
    current_by_ex = _summarize_by_exercise(current)
    previous_by_ex = _summarize_by_exercise(previous)
    result = []
    for exercise_id in sorted(current_by_ex):
        cur_w, cur_v = current_by_ex[exercise_id]
        prev_w, prev_v = previous_by_ex.get(exercise_id, (0, 0))
        result.append(
            {
                "exercise_id": exercise_id,
                "exercise_name": names.get(exercise_id),
                "current_max_weight": cur_w,
                "previous_max_weight": prev_w,
                "weight_diff": cur_w - prev_w,
                "current_volume": cur_v,
                "previous_volume": prev_v,
                "volume_diff": cur_v - prev_v,
            }
        )
    return result
