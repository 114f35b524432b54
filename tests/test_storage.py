import json

from srctracker.core.storage import LoadStatus, StatsRecord, load_record, save_record


def test_missing_file(tmp_path):
    result = load_record(tmp_path / "absent.json")
    assert result.status is LoadStatus.MISSING
    assert result.ok
    assert result.record == StatsRecord()


def test_null_document_loads_as_zero(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("null", encoding="utf-8")

    result = load_record(path)
    assert result.status is LoadStatus.LOADED
    assert result.record.manual_chars == 0


def test_missing_fields_default_to_zero(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text(json.dumps({"copied_chars": 9}), encoding="utf-8")

    result = load_record(path)
    assert result.status is LoadStatus.LOADED
    assert result.record.copied_chars == 9
    assert result.record.ai_chars == 0


def test_invalid_json_reports_reason(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text("{manual_chars: 1", encoding="utf-8")

    result = load_record(path)
    assert result.status is LoadStatus.CORRUPT
    assert not result.ok
    assert "invalid JSON" in result.error


def test_non_object_is_corrupt(tmp_path):
    path = tmp_path / "stats.json"
    path.write_text('"hello"', encoding="utf-8")

    result = load_record(path)
    assert result.status is LoadStatus.CORRUPT
    assert "str" in result.error


def test_save_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "stats.json"
    result = save_record(path, StatsRecord(manual_chars=1, copied_chars=2, ai_chars=3))

    assert result.ok
    assert result.error is None
    assert load_record(path).record == StatsRecord(manual_chars=1, copied_chars=2, ai_chars=3)


def test_save_reports_failure(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")

    result = save_record(blocker / "stats.json", StatsRecord())
    assert not result.ok
    assert result.error


def test_overlong_path_is_unreadable_not_raised(tmp_path):
    result = load_record(tmp_path / ("y" * 300) / "stats.json")
    assert result.status is LoadStatus.UNREADABLE
    assert result.error
    assert result.record == StatsRecord()
