import json

import pytest
from storage.file_manager import FileManager


@pytest.mark.asyncio
async def test_save_report_sanitises_name(tmp_path):
    manager = FileManager(reports_dir=str(tmp_path / "reports"))

    path = await manager.save_report("FactCheckLayer_2024-01-01T00:00:00+00:00", {"a": 1})

    assert path.endswith("FactCheckLayer_2024-01-01T00_00_00_00_00.json")
    assert json.loads(open(path, encoding="utf-8").read()) == {"a": 1}


@pytest.mark.asyncio
async def test_read_json_and_write_text(tmp_path):
    manager = FileManager(reports_dir=str(tmp_path))
    target = tmp_path / "nested" / "log.json"

    await manager.write_text(str(target), '{"ok": true}')

    assert await manager.read_json(str(target)) == {"ok": True}


@pytest.mark.asyncio
async def test_read_json_invalid(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        await FileManager(reports_dir=str(tmp_path)).read_json(str(bad))
