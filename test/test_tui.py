"""Tests for the Textual dashboard, driven through Textual's pilot."""

import pytest

from config import AppConfig
from dashboard import SessionState
from skills.types import ConversionStatus, SkillDir, SkillPlatform
from tui import SkillPorterTUI
from tui.screens import DashboardScreen, HelpScreen, SetupScreen
from tui.widgets.skill_list import render_skill_rows
from utils.theme import Theme


async def _wait_for(pilot, predicate, attempts: int = 100) -> None:
    for _ in range(attempts):
        if predicate():
            return
        await pilot.pause(0.05)
    raise AssertionError("condition not met in time")


@pytest.mark.asyncio
async def test_setup_scan_convert_quit(skill_tree, fake_converter):
    app = SkillPorterTUI(
        AppConfig(scan_root=str(skill_tree), recursive=False, converter=str(fake_converter))
    )
    controller = app.controller

    try:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert isinstance(app.screen, SetupScreen)

            await pilot.press("enter")
            await _wait_for(pilot, lambda: len(controller.skills) == 3)
            await _wait_for(pilot, lambda: isinstance(app.screen, DashboardScreen))
            assert controller.state == SessionState.BROWSING

            await pilot.press("j")
            await _wait_for(pilot, lambda: controller.cursor == 1)

            await pilot.press("c")
            await _wait_for(
                pilot, lambda: controller.skills[1].status == ConversionStatus.SUCCESS
            )
            assert controller.summary().success == 1

            await pilot.press("q")
            await _wait_for(pilot, lambda: controller.quit_requested)
    finally:
        await app.control_loop.shutdown()


@pytest.mark.asyncio
async def test_help_and_back_to_setup(skill_tree, fake_converter):
    app = SkillPorterTUI(AppConfig(scan_root=str(skill_tree), converter=str(fake_converter)))
    controller = app.controller

    try:
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("enter")
            await _wait_for(pilot, lambda: isinstance(app.screen, DashboardScreen))

            await pilot.press("f1")
            await _wait_for(pilot, lambda: isinstance(app.screen, HelpScreen))
            await pilot.press("escape")
            await _wait_for(pilot, lambda: isinstance(app.screen, DashboardScreen))

            await pilot.press("escape")
            await _wait_for(pilot, lambda: isinstance(app.screen, SetupScreen))
            assert controller.state == SessionState.CONFIGURING
    finally:
        await app.control_loop.shutdown()


def test_skill_rows_use_the_console_palette():
    skills = [
        SkillDir(name="alpha", path="/skills/alpha", platform=SkillPlatform.CLAUDE),
        SkillDir(
            name="beta",
            path="/skills/beta",
            platform=SkillPlatform.GEMINI,
            status=ConversionStatus.FAILED,
        ),
    ]
    palette = Theme.palette()

    text = render_skill_rows(skills, cursor=1)

    styles = {str(span.style) for span in text.spans}
    assert palette.for_status(ConversionStatus.PENDING) in styles
    assert palette.for_status(ConversionStatus.FAILED) in styles
    assert text.plain.splitlines() == ["  alpha [Pending]", "> beta [Failed]"]
