import pytest

from conversion import (
    InvalidInputError,
    UnresolvedTargetError,
    UnsupportedTargetError,
    build_convert_command,
    resolve_target,
)
from skills.types import ConversionTarget, SkillDir, SkillPlatform


def _skill(platform: SkillPlatform, target: ConversionTarget = ConversionTarget.AUTO) -> SkillDir:
    return SkillDir(name="demo", path="/skills/demo", platform=platform, target=target)


class TestBuildConvertCommand:
    def test_in_place(self):
        assert build_convert_command("/skills/demo", ConversionTarget.GEMINI) == [
            "convert",
            "/skills/demo",
            "--to",
            "gemini",
        ]

    def test_with_output_dir(self):
        assert build_convert_command("/skills/demo", ConversionTarget.CLAUDE, "/out/demo") == [
            "convert",
            "/skills/demo",
            "--to",
            "claude",
            "--output",
            "/out/demo",
        ]

    def test_target_name_is_case_insensitive(self):
        assert build_convert_command("/s", "GEMINI")[-1] == "gemini"

    def test_empty_path(self):
        with pytest.raises(InvalidInputError):
            build_convert_command("", ConversionTarget.GEMINI)

    def test_auto_target_is_rejected(self):
        with pytest.raises(UnresolvedTargetError, match="must be resolved"):
            build_convert_command("/skills/demo", ConversionTarget.AUTO)

    def test_unknown_target(self):
        with pytest.raises(UnsupportedTargetError):
            build_convert_command("/skills/demo", "codex")


class TestResolveTarget:
    def test_override_wins(self):
        skill = _skill(SkillPlatform.CLAUDE, ConversionTarget.GEMINI)
        resolved = resolve_target(skill, ConversionTarget.CLAUDE, ConversionTarget.GEMINI)
        assert resolved == ConversionTarget.CLAUDE

    def test_skill_target_beats_default(self):
        skill = _skill(SkillPlatform.CLAUDE, ConversionTarget.CLAUDE)
        resolved = resolve_target(skill, ConversionTarget.AUTO, ConversionTarget.GEMINI)
        assert resolved == ConversionTarget.CLAUDE

    def test_session_default(self):
        skill = _skill(SkillPlatform.GEMINI)
        resolved = resolve_target(skill, ConversionTarget.AUTO, ConversionTarget.GEMINI)
        assert resolved == ConversionTarget.GEMINI

    @pytest.mark.parametrize(
        "platform, expected",
        [
            (SkillPlatform.CLAUDE, ConversionTarget.GEMINI),
            (SkillPlatform.GEMINI, ConversionTarget.CLAUDE),
            (SkillPlatform.UNIVERSAL, ConversionTarget.GEMINI),
        ],
    )
    def test_inferred_from_platform(self, platform, expected):
        skill = _skill(platform)
        assert resolve_target(skill, ConversionTarget.AUTO, ConversionTarget.AUTO) == expected
