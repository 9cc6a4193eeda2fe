"""
Unit tests for the insights CLI.

Tests cover:
- Reports from a JSON export file
- Option handling and error exits
- Reports from the Supabase repositories
"""
import json

import pytest
from datetime import timedelta

import backend.cli as cli
from tests.fakes import (
    NOW,
    FakeExercisesRepository,
    create_sets_repo,
    make_exercise,
    make_set,
)


NOW_ARG = "2024-01-15T12:00:00Z"


def export_payload():
    """A small export in the logging app's camelCase format."""
    day = 24 * 60 * 60 * 1000
    now_ms = 1705320000000
    return {
        "exercises": [
            {"_id": "bench", "userId": "u1", "name": "Bench Press", "createdAt": now_ms - 30 * day},
            {"_id": "squat", "userId": "u1", "name": "Squat", "createdAt": now_ms - 30 * day},
        ],
        "sets": [
            {"_id": "s1", "userId": "u1", "exerciseId": "bench", "reps": 5,
             "weight": 200, "unit": "lbs", "performedAt": now_ms - day},
            {"_id": "s2", "userId": "u1", "exerciseId": "bench", "reps": 5,
             "weight": 100, "unit": "kg", "performedAt": now_ms},
            {"_id": "s3", "userId": "u1", "exerciseId": "squat", "reps": 10,
             "performedAt": now_ms - 10 * day},
        ],
    }


@pytest.fixture
def export_file(tmp_path):
    path = tmp_path / "export.json"
    path.write_text(json.dumps(export_payload()))
    return path


@pytest.mark.unit
class TestParseTimestamp:
    def test_z_suffix(self):
        assert cli.parse_timestamp(NOW_ARG) == NOW

    def test_naive_is_utc(self):
        assert cli.parse_timestamp("2024-01-15T12:00:00") == NOW

    def test_invalid(self):
        import argparse

        with pytest.raises(argparse.ArgumentTypeError):
            cli.parse_timestamp("yesterday")


@pytest.mark.unit
class TestReportFromFile:
    """--input reads a JSON export."""

    def test_prints_report(self, export_file, capsys):
        assert cli.main(["--input", str(export_file), "--now", NOW_ARG]) == 0

        report = json.loads(capsys.readouterr().out)
        assert report["generated_at"] == "2024-01-15T12:00:00+00:00"
        assert report["streaks"] == {"current_streak": 2, "longest_streak": 2, "total_workouts": 3}
        assert len(report["recovery"]) == 10
        assert [s["exercise_id"] for s in report["progressive_overload"]] == ["bench", "squat"]
        assert report["focus_suggestions"][0]["title"] == "Train Squat"
        assert report["daily_stats"]["total_sets"] == 1

    def test_unit_option(self, export_file, capsys):
        assert cli.main(["--input", str(export_file), "--now", NOW_ARG, "--unit", "kg"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["daily_stats"]["total_volume"] == 500

    def test_limit_and_exercise_count(self, export_file, capsys):
        argv = ["-i", str(export_file), "--now", NOW_ARG, "--limit", "1", "--exercise-count", "1"]
        assert cli.main(argv) == 0
        report = json.loads(capsys.readouterr().out)
        assert len(report["focus_suggestions"]) == 1
        assert len(report["progressive_overload"]) == 1

    def test_output_file(self, export_file, tmp_path, capsys):
        out = tmp_path / "report.json"
        assert cli.main(["--input", str(export_file), "--now", NOW_ARG, "-o", str(out)]) == 0
        assert capsys.readouterr().out == ""
        assert json.loads(out.read_text())["streaks"]["total_workouts"] == 3


@pytest.mark.unit
class TestErrors:
    """Failures exit non-zero with a message on stderr."""

    def test_missing_file(self, tmp_path, capsys):
        missing = tmp_path / "nope.json"
        assert cli.main(["--input", str(missing)]) == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        assert cli.main(["--input", str(path)]) == 1
        assert "Invalid JSON" in capsys.readouterr().err

    def test_invalid_record(self, tmp_path, capsys):
        payload = export_payload()
        payload["sets"][0]["reps"] = 0
        path = tmp_path / "export.json"
        path.write_text(json.dumps(payload))
        assert cli.main(["--input", str(path)]) == 1
        assert "Invalid record" in capsys.readouterr().err

    def test_export_must_be_object(self, tmp_path, capsys):
        path = tmp_path / "export.json"
        path.write_text("[]")
        assert cli.main(["--input", str(path)]) == 1
        assert "JSON object" in capsys.readouterr().err

    def test_source_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

    def test_sources_are_exclusive(self, export_file):
        with pytest.raises(SystemExit):
            cli.main(["--input", str(export_file), "--user-id", "u1"])

    def test_limit_must_be_positive(self, export_file):
        with pytest.raises(SystemExit):
            cli.main(["--input", str(export_file), "--limit", "0"])


@pytest.mark.unit
class TestReportFromSupabase:
    """--user-id reads through the repositories."""

    def test_not_configured(self, monkeypatch, capsys):
        monkeypatch.setattr(cli, "get_supabase_client", lambda settings: None)
        assert cli.main(["--user-id", "u1"]) == 1
        assert "Supabase is not configured" in capsys.readouterr().err

    def test_report_for_user(self, monkeypatch, capsys):
        sets_repo = create_sets_repo(
            make_set(exercise_id="bench", reps=5, weight=200, performed_at=NOW - timedelta(days=1)),
            make_set(exercise_id="bench", reps=5, weight=210, performed_at=NOW),
        )
        exercises_repo = FakeExercisesRepository([make_exercise("bench", "Bench Press")])

        monkeypatch.setattr(cli, "get_supabase_client", lambda settings: object())
        monkeypatch.setattr(cli, "SupabaseSetsRepository", lambda client: sets_repo)
        monkeypatch.setattr(cli, "SupabaseExercisesRepository", lambda client: exercises_repo)

        assert cli.main(["--user-id", "test_user", "--now", NOW_ARG, "--limit", "3"]) == 0
        report = json.loads(capsys.readouterr().out)
        assert report["user_id"] == "test_user"
        assert report["streaks"]["current_streak"] == 2
        assert len(report["focus_suggestions"]) == 3
        assert sets_repo.calls == ["test_user"]
