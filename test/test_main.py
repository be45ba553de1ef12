import pytest

from config import AppConfig
from main import run_auto_mode


@pytest.mark.asyncio
async def test_auto_mode_converts_everything(skill_tree, fake_converter, capsys):
    failures = await run_auto_mode(AppConfig(scan_root=str(skill_tree), converter=str(fake_converter)))

    assert failures == 0
    output = capsys.readouterr().out
    assert "deep-skill" in output
    assert "Success: 4" in output


@pytest.mark.asyncio
async def test_auto_mode_reports_failures(skill_tree, failing_converter):
    failures = await run_auto_mode(
        AppConfig(scan_root=str(skill_tree), recursive=False, converter=str(failing_converter))
    )
    assert failures == 3


@pytest.mark.asyncio
async def test_auto_mode_with_missing_root(tmp_path, fake_converter):
    failures = await run_auto_mode(
        AppConfig(scan_root=str(tmp_path / "missing"), converter=str(fake_converter))
    )
    assert failures == 1
