from datetime import datetime, timezone

from app.services.fingerprint_service import simulated_template
from app.services.payroll_service import month_bounds
from app.services.soldier_service import format_soldier_id, parse_sequence


def test_format_soldier_id():
    assert format_soldier_id(1) == "CMJ00001"
    assert format_soldier_id(123) == "CMJ00123"
    assert format_soldier_id(123456) == "CMJ123456"
    assert format_soldier_id(7, prefix="X", digits=3) == "X007"


def test_parse_sequence():
    assert parse_sequence("CMJ00042") == 42
    assert parse_sequence(None) == 0
    assert parse_sequence("ABC00042") == 0
    assert parse_sequence("CMJ-bad") == 0


def test_month_bounds():
    utc = timezone.utc
    assert month_bounds(2, 2024) == (datetime(2024, 2, 1, tzinfo=utc), datetime(2024, 3, 1, tzinfo=utc))
    assert month_bounds(12, 2024) == (datetime(2024, 12, 1, tzinfo=utc), datetime(2025, 1, 1, tzinfo=utc))
    assert month_bounds(12, 2024)[0].tzinfo is utc


def test_simulated_template_is_deterministic():
    assert simulated_template("CMJ00001") == simulated_template("CMJ00001")
    assert simulated_template("CMJ00001") != simulated_template("CMJ00002")
    assert simulated_template("CMJ00001").startswith("SIM-")
