"""
Tests for JsonFileContactStore against real files under tmp_path.
"""

import json

import pytest

from vcfcollector.adapters.json_file_store import JsonFileContactStore
from vcfcollector.domain.interfaces.i_contact_store import SnapshotUnreadableError
from vcfcollector.use_cases.contact_ledger import ContactLedger
from vcfcollector.use_cases.submit_contact import SubmitContactRequest, SubmitContactUseCase
from tests.conftest import make_record, make_records


@pytest.fixture
def path(tmp_path):
    return tmp_path / "contacts.json"


class TestLoad:
    def test_missing_file_is_empty(self, path):
        assert JsonFileContactStore(path).load() == []

    def test_reads_legacy_snapshot(self, path):
        path.write_text(json.dumps([
            {
                "id": 1735689600000,
                "name": "Asha",
                "phone": "+255 712 345 678",
                "photo": "",
                "timestamp": "2025-01-01T00:00:00.000Z",
                "ip": "::1",
            }
        ]))
        records = JsonFileContactStore(path).load()
        assert len(records) == 1
        assert records[0].id == 1735689600000
        assert records[0].source_address == "::1"

    @pytest.mark.parametrize("content", [
        "{not json",
        '{"contacts": []}',
        "[1, 2, 3]",
        '[{"id": 1}]',
        '[{"id": 1, "name": "A", "phone": "07", "photo": 5, "timestamp": "2025-01-01T00:00:00Z"}]',
        '[{"id": 1, "name": "A", "phone": "07", "ip": ["x"], "timestamp": "2025-01-01T00:00:00Z"}]',
        "",
    ])
    def test_corrupt_snapshot_raises(self, path, content):
        path.write_text(content)
        with pytest.raises(SnapshotUnreadableError):
            JsonFileContactStore(path).load()


class TestSave:
    def test_writes_indented_array(self, path):
        JsonFileContactStore(path).save([make_record()])
        text = path.read_text(encoding="utf-8")
        assert text.startswith("[\n  {")
        assert json.loads(text)[0]["name"] == "Asha Mwita"

    def test_keeps_non_ascii(self, path):
        JsonFileContactStore(path).save([make_record(name="Zuhura 🌟")])
        assert "Zuhura 🌟" in path.read_text(encoding="utf-8")

    def test_rewrites_wholesale(self, path):
        store = JsonFileContactStore(path)
        store.save(make_records(3))
        store.save(make_records(1))
        assert len(json.loads(path.read_text())) == 1

    def test_missing_directory_raises_oserror(self, tmp_path):
        store = JsonFileContactStore(tmp_path / "nope" / "contacts.json")
        with pytest.raises(OSError):
            store.save([make_record()])


class TestRestartRoundTrip:
    @pytest.mark.asyncio
    async def test_restart_restores_identical_records(self, path):
        ledger = ContactLedger(JsonFileContactStore(path))
        ledger.initialize()
        use_case = SubmitContactUseCase(ledger)
        for i in range(5):
            await use_case.execute(SubmitContactRequest(
                name=f"Person {i}",
                phone=f"0712 000 00{i}",
                photo="data:image/jpeg;base64,QUJD" if i % 2 else None,
                source_address=f"10.0.0.{i}",
            ))

        restarted = ContactLedger(JsonFileContactStore(path))
        restarted.initialize()
        assert restarted.count == 5
        assert [r.to_dict() for r in restarted.records] == [r.to_dict() for r in ledger.records]

    def test_corrupt_file_starts_fresh(self, path):
        path.write_text("garbage")
        ledger = ContactLedger(JsonFileContactStore(path))
        ledger.initialize()
        assert ledger.count == 0
