from datetime import date, datetime

from hypertrophy_tracker.services.progress_aggregation import (
    SetRow,
    aggregate_progress,
    compare_logs,
    pick_last_weights,
)


def row(log_id, session_id, when, exercise_id, set_number, reps, weight):
    return SetRow(log_id, session_id, when, exercise_id, set_number, reps, weight)


def test_single_date_sums_volume_and_takes_max():
    day = datetime(2024, 3, 4, 18, 0)
    rows = [row(1, 1, day, 7, 1, 8, 60), row(2, 1, day, 7, 2, 7, 60), row(3, 1, day, 7, 3, 6, 60)]

    points = aggregate_progress(rows)

    assert points == [
        {"date": date(2024, 3, 4), "max_weight": 60, "total_volume": 1260, "set_count": 3}
    ]


def test_no_rows_gives_empty_list():
    assert aggregate_progress([]) == []


def test_points_are_chronological_and_same_day_sessions_merge():
    rows = [
        row(5, 3, datetime(2024, 1, 10, 9), 1, 1, 10, 40),
        row(1, 1, datetime(2024, 1, 3, 8), 1, 1, 10, 30),
        row(2, 2, datetime(2024, 1, 3, 19), 1, 1, 5, 35),
    ]

    points = aggregate_progress(rows)

    assert [p["date"] for p in points] == [date(2024, 1, 3), date(2024, 1, 10)]
    assert points[0] == {
        "date": date(2024, 1, 3),
        "max_weight": 35,
        "total_volume": 30 * 10 + 35 * 5,
        "set_count": 2,
    }


def test_last_weight_is_from_latest_session_date():
    rows = [
        row(1, 1, datetime(2024, 1, 1), 4, 1, 10, 50),
        row(2, 2, datetime(2024, 1, 15), 4, 1, 8, 55),
    ]

    result = pick_last_weights(rows)

    assert result == {4: {"weight": 55, "reps": 8, "date": datetime(2024, 1, 15)}}


def test_last_weight_tiebreak_on_same_date_is_deterministic():
    same_day = datetime(2024, 2, 2)
    rows = [
        row(10, 2, same_day, 4, 3, 6, 70),
        row(11, 2, same_day, 4, 1, 10, 60),
        row(9, 1, same_day, 4, 4, 5, 80),
    ]

    # higher session id wins, then higher set number
    assert pick_last_weights(rows)[4]["weight"] == 70
    assert pick_last_weights(reversed(rows))[4]["weight"] == 70


def test_last_weights_empty():
    assert pick_last_weights([]) == {}


def test_compare_logs_without_previous_session():
    result = compare_logs([(1, 50, 10), (1, 55, 8)], [], {1: "Press"})

    assert result == [
        {
            "exercise_id": 1,
            "exercise_name": "Press",
            "current_max_weight": 55,
            "previous_max_weight": 0,
            "weight_diff": 55,
            "current_volume": 50 * 10 + 55 * 8,
            "previous_volume": 0,
            "volume_diff": 50 * 10 + 55 * 8,
        }
    ]


def test_compare_logs_only_reports_current_exercises():
    result = compare_logs([(2, 40, 10)], [(2, 35, 10), (3, 100, 5)])

    assert [r["exercise_id"] for r in result] == [2]
    assert result[0]["weight_diff"] == 5
    assert result[0]["volume_diff"] == 50
