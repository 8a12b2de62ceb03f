import asyncio

import yaml

from resume_intake.models.resume_models import ContactInfo, ResumeRecord, StoredResume
from resume_intake.services.record_store import ResumeRecordStore


def _stored(record_id="jane_doe", name="Jane Doe", skills="Go"):
    return StoredResume(
        id=record_id,
        file_name="jane.txt",
        mime_type="text/plain",
        file_hash="abc123",
        record=ResumeRecord(name=name, skills=skills, contact_info=ContactInfo(email="j@x.io")),
        source_text=f"Name: {name}\nSkills: {skills}",
    )


def test_upsert_inserts_then_updates(store):
    assert asyncio.run(store.upsert(_stored(skills="Go"))) is True
    assert asyncio.run(store.upsert(_stored(skills="Rust"))) is False

    records = store.list_records()
    assert len(records) == 1
    assert store.get("jane_doe").record.skills == "Rust"


def test_records_survive_reload(store):
    asyncio.run(store.upsert(_stored()))
    asyncio.run(store.upsert(_stored(record_id="john_roe", name="John Roe")))

    reloaded = ResumeRecordStore(store.path)

    assert {r.id for r in reloaded.list_records()} == {"jane_doe", "john_roe"}
    assert reloaded.get("jane_doe") == store.get("jane_doe")


def test_empty_and_absent_fields_round_trip(store):
    stored = _stored()
    stored.record = ResumeRecord(name="", summary=None)
    asyncio.run(store.upsert(stored))

    record = ResumeRecordStore(store.path).get("jane_doe").record
    assert record.name == ""
    assert record.summary is None


def test_delete_and_clear(store):
    asyncio.run(store.upsert(_stored()))
    asyncio.run(store.upsert(_stored(record_id="john_roe")))

    assert asyncio.run(store.delete("jane_doe")) is True
    assert asyncio.run(store.delete("jane_doe")) is False
    assert asyncio.run(store.clear()) == 1
    assert ResumeRecordStore(store.path).list_records() == []


def test_missing_file_is_empty(tmp_path):
    assert ResumeRecordStore(tmp_path / "nope" / "records.yaml").list_records() == []


def test_invalid_entries_are_skipped(tmp_path):
    path = tmp_path / "records.yaml"
    good = _stored().model_dump()
    path.write_text(yaml.safe_dump({"records": [good, {"id": "broken"}, "junk"]}), encoding="utf-8")

    store = ResumeRecordStore(path)

    assert [r.id for r in store.list_records()] == ["jane_doe"]


def test_unreadable_yaml_is_empty(tmp_path):
    path = tmp_path / "records.yaml"
    path.write_text("records: [unclosed", encoding="utf-8")

    assert ResumeRecordStore(path).list_records() == []


def test_concurrent_upserts_for_same_id(store):
    async def upsert_all():
        return await asyncio.gather(
            *(store.upsert(_stored(skills=f"skill-{i}")) for i in range(10))
        )

    results = asyncio.run(upsert_all())

    assert results.count(True) == 1
    assert len(store.list_records()) == 1
    assert ResumeRecordStore(store.path).get("jane_doe").record.skills.startswith("skill-")


def test_deleting_unknown_ids_keeps_store_state_constant(store):
    lock = store._lock
    attributes = set(vars(store))

    async def delete_many():
        return [await store.delete(f"nope-{i}") for i in range(1000)]

    assert not any(asyncio.run(delete_many()))
    assert store._lock is lock
    assert set(vars(store)) == attributes
    assert store.list_records() == []
