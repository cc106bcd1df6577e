"""Monthly payroll over the verification log."""

from datetime import datetime, timezone

import pytest

from app.models.fingerprint_verification import FingerprintVerification


@pytest.fixture
def add_verifications(run_async, session_factory):
    """Insert log rows with explicit timestamps."""
    def _add(*rows):
        async def _insert():
            async with session_factory() as session:
                for row in rows:
                    session.add(FingerprintVerification(**row))
                await session.commit()
        run_async(_insert)
    return _add


def _at(*parts):
    return datetime(*parts, tzinfo=timezone.utc)


def _row(verified_at, salary, platoon="Horin 1", rank="Private", name="Soldier", soldier_id=None):
    return {
        "soldier_id": soldier_id,
        "full_names": name,
        "rank_position": rank,
        "net_salary": salary,
        "horin_platoon": platoon,
        "verified_at": verified_at,
    }


class TestMonthlyPayroll:
    def test_total_is_sum_within_month(self, client, add_verifications):
        add_verifications(
            _row(_at(2024, 3, 1, 0, 0, 0), 300.0, name="A"),
            _row(_at(2024, 3, 15, 8, 30), 450.5, name="B"),
            _row(_at(2024, 3, 31, 23, 59, 59), 200.0, name="C"),
            _row(_at(2024, 2, 29, 23, 59, 59), 1000.0, name="D"),
            _row(_at(2024, 4, 1, 0, 0, 0), 1000.0, name="E"),
            _row(_at(2023, 3, 10), 1000.0, name="F"),
        )
        report = client.get("/monthly-payroll", params={"month": 3, "year": 2024}).json()
        assert report["month"] == 3
        assert report["year"] == 2024
        assert report["total_records"] == 3
        assert report["total_soldiers"] == 3
        assert report["total_salary"] == pytest.approx(950.5)

    def test_ordered_by_platoon_then_rank(self, client, add_verifications):
        add_verifications(
            _row(_at(2024, 5, 2), 100.0, platoon="Horin 2", rank="Private", name="W"),
            _row(_at(2024, 5, 3), 100.0, platoon="Horin 1", rank="Sergeant", name="X"),
            _row(_at(2024, 5, 4), 100.0, platoon="Horin 1", rank="Captain", name="Y"),
        )
        report = client.get("/monthly-payroll", params={"month": 5, "year": 2024}).json()
        assert [r["full_names"] for r in report["records"]] == ["Y", "X", "W"]

    def test_december_rolls_into_next_year(self, client, add_verifications):
        add_verifications(
            _row(_at(2024, 12, 31, 23, 0), 100.0),
            _row(_at(2025, 1, 1, 0, 0), 900.0),
        )
        report = client.get("/monthly-payroll", params={"month": 12, "year": 2024}).json()
        assert report["total_salary"] == pytest.approx(100.0)

    def test_repeat_verifications_counted_per_row(self, client, add_verifications):
        add_verifications(
            _row(_at(2024, 6, 1), 300.0, soldier_id="CMJ00001"),
            _row(_at(2024, 6, 2), 300.0, soldier_id="CMJ00001"),
        )
        report = client.get("/monthly-payroll", params={"month": 6, "year": 2024}).json()
        assert report["total_records"] == 2
        assert report["total_soldiers"] == 1
        assert report["total_salary"] == pytest.approx(600.0)

    def test_defaults_to_current_month(self, client, register):
        register(fingerprint_data="TPL-now", net_salary=320.0)
        client.post("/fingerprints/verify", json={"fingerprint_template": "TPL-now"})
        now = datetime.now(timezone.utc)
        report = client.get("/monthly-payroll").json()
        assert report["month"] == now.month
        assert report["year"] == now.year
        assert report["total_salary"] == pytest.approx(320.0)

    def test_empty_month(self, client):
        report = client.get("/monthly-payroll", params={"month": 1, "year": 2000}).json()
        assert report["records"] == []
        assert report["total_salary"] == 0

    def test_invalid_month(self, client):
        assert client.get("/monthly-payroll", params={"month": 13}).status_code == 400
