import asyncio

import pytest
from weather_xml.artifact import write_artifact


@pytest.mark.asyncio
async def test_write_artifact_creates(tmp_path):
    path = tmp_path / "last_response.xml"
    await write_artifact(path, "<weather_data></weather_data>\n")
    assert path.read_text(encoding="utf-8") == "<weather_data></weather_data>\n"


@pytest.mark.asyncio
async def test_write_artifact_overwrites(tmp_path):
    path = tmp_path / "last_response.xml"
    path.write_text("old content that is longer than the new one", encoding="utf-8")
    await write_artifact(path, "new")
    assert path.read_text(encoding="utf-8") == "new"


@pytest.mark.asyncio
async def test_write_artifact_utf8(tmp_path):
    path = tmp_path / "last_response.xml"
    await write_artifact(path, "<rainfall>Niederschlag ÄÖÜ</rainfall>")
    assert path.read_bytes() == "<rainfall>Niederschlag ÄÖÜ</rainfall>".encode()


@pytest.mark.asyncio
async def test_concurrent_writes_leave_one_whole_file(tmp_path):
    path = tmp_path / "last_response.xml"
    bodies = [f"<doc>{i}</doc>" * 100 for i in range(10)]
    await asyncio.gather(*(write_artifact(path, body) for body in bodies))

    assert path.read_text(encoding="utf-8") in bodies
    # No temp files left behind
    assert [p.name for p in tmp_path.iterdir()] == ["last_response.xml"]


@pytest.mark.asyncio
async def test_write_artifact_missing_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        await write_artifact(tmp_path / "nope" / "last_response.xml", "x")
