"""
Store tests against in-memory SQLite.
"""
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from compliance.models import ObligationModel
from compliance.pipeline.seed import initialize_schema, reseed
from compliance.schemas import AlertCreate, ObligationCreate, ObligationStatus
from compliance.store import AlertStore, DocumentStore, ObligationNotFound, ObligationStore


def make_obligation(**overrides) -> ObligationCreate:
    fields = {
        "name": "Quarterly Federal Tax Return (Form 941)",
        "type": "federal",
        "category": "Payroll Tax",
        "due_date": date(2025, 1, 31),
        "frequency": "Quarterly",
        "description": "Quarterly payroll tax return",
    }
    fields.update(overrides)
    return ObligationCreate(**fields)


class TestObligationStore:
    def test_initialize_schema_is_idempotent(self, db):
        store = ObligationStore(db)
        store.initialize_schema()
        store.initialize_schema()
        assert store.list_all() == []

    def test_add_round_trip_defaults_pending(self, db):
        store = ObligationStore(db)
        created = store.add(make_obligation())

        rows = store.list_all()
        assert len(rows) == 1
        row = rows[0]
        assert row.id == created.id
        assert row.name == "Quarterly Federal Tax Return (Form 941)"
        assert row.type == "federal"
        assert row.category == "Payroll Tax"
        assert row.due_date == date(2025, 1, 31)
        assert row.frequency == "Quarterly"
        assert row.description == "Quarterly payroll tax return"
        assert row.status == "pending"
        assert row.created_at is not None and row.updated_at is not None

    def test_add_keeps_caller_status(self, db):
        row = ObligationStore(db).add(make_obligation(status="completed"))
        assert row.status == "completed"

    def test_list_all_ordered_by_due_date(self, db):
        store = ObligationStore(db)
        store.add(make_obligation(name="late", due_date=date(2025, 6, 30)))
        store.add(make_obligation(name="early", due_date=date(2025, 1, 1)))
        store.add(make_obligation(name="middle", due_date=date(2025, 3, 15)))
        assert [r.name for r in store.list_all()] == ["early", "middle", "late"]

    def test_update_status(self, db):
        store = ObligationStore(db)
        created = store.add(make_obligation())
        before = created.updated_at

        updated = store.update_status(created.id, ObligationStatus.COMPLETED)
        assert updated.status == "completed"
        assert updated.updated_at >= before
        assert store.get(created.id).status == "completed"

    def test_update_status_accepts_plain_string(self, db):
        store = ObligationStore(db)
        created = store.add(make_obligation())
        assert store.update_status(created.id, "overdue").status == "overdue"

    def test_update_status_unknown_id(self, db):
        with pytest.raises(ObligationNotFound) as exc:
            ObligationStore(db).update_status("does-not-exist", ObligationStatus.COMPLETED)
        assert exc.value.obligation_id == "does-not-exist"

    def test_stored_status_not_recomputed(self, db):
        store = ObligationStore(db)
        store.add(make_obligation(due_date=date(2000, 1, 1)))
        assert store.list_all()[0].status == "pending"

    def test_check_constraint_rejects_bad_type(self, db):
        db.add(
            ObligationModel(
                id="x", name="n", type="galactic", category="c",
                due_date=date(2025, 1, 1), status="pending",
            )
        )
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()

    def test_clear_all(self, db):
        store = ObligationStore(db)
        store.add(make_obligation())
        store.add(make_obligation())
        assert store.clear_all() == 2
        assert store.list_all() == []


class TestAlertStore:
    def test_list_recent_caps_and_orders(self, db):
        store = AlertStore(db)
        base = datetime(2025, 1, 1, 12, 0)
        for i in range(12):
            row = store.add(AlertCreate(title=f"alert {i}", type="new", source="IRS.gov"))
            row.created_at = base + timedelta(minutes=i)
        db.commit()

        recent = store.list_recent(10)
        assert len(recent) == 10
        assert [a.title for a in recent] == [f"alert {i}" for i in range(11, 1, -1)]

    def test_list_recent_default_is_ten(self, db):
        store = AlertStore(db)
        for i in range(11):
            store.add(AlertCreate(title=f"a{i}", type="update"))
        assert len(store.list_recent()) == 10

    def test_list_recent_fewer_than_limit(self, db):
        store = AlertStore(db)
        store.add(AlertCreate(title="only", type="deadline"))
        assert [a.title for a in store.list_recent()] == ["only"]

    def test_clear_all(self, db):
        store = AlertStore(db)
        store.add(AlertCreate(title="x", type="new"))
        assert store.clear_all() == 1
        assert store.list_recent() == []


class TestSeed:
    def test_reseed_loads_fixed_dataset(self, db):
        initialize_schema(db)
        counts = reseed(db, date(2025, 8, 31))
        assert counts == {"obligations": 11, "alerts": 3}

        rows = ObligationStore(db).list_all()
        assert sum(1 for r in rows if r.type == "state") == 5
        assert sum(1 for r in rows if r.type == "federal") == 6
        assert all(r.status == "pending" for r in rows)
        anniversary = [r for r in rows if r.due_date == date(2025, 8, 31)]
        assert {r.name for r in anniversary} == {
            "Nevada Annual List of Managers/Members",
            "Nevada State Business License Renewal",
        }

    def test_reseed_is_destructive(self, db):
        ObligationStore(db).add(make_obligation(name="custom"))
        reseed(db, date(2025, 8, 31))
        reseed(db, date(2025, 8, 31))
        rows = ObligationStore(db).list_all()
        assert len(rows) == 11
        assert "custom" not in {r.name for r in rows}
        assert len(AlertStore(db).list_recent()) == 3
        assert DocumentStore(db).list_all() == []
