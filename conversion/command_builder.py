"""Target resolution and argument construction for the skill-porter converter."""

from __future__ import annotations

from typing import Protocol, Union

from skills.types import ConversionTarget, SkillPlatform

from .errors import InvalidInputError, UnresolvedTargetError, UnsupportedTargetError

_SUPPORTED_TARGETS = ("gemini", "claude")


class Resolvable(Protocol):
    platform: SkillPlatform
    target: ConversionTarget


def resolve_target(
    skill: Resolvable,
    override: ConversionTarget,
    default_target: ConversionTarget,
) -> ConversionTarget:
    """Pick a concrete target for ``skill``.

    The first non-Auto value of ``override``, ``skill.target`` and
    ``default_target`` wins. Otherwise the target is inferred from the
    skill's platform: Claude skills go to Gemini, Gemini skills go to Claude,
    and anything else goes to Gemini. Never returns AUTO.
    """
    for candidate in (override, skill.target, default_target):
        if candidate != ConversionTarget.AUTO:
            return candidate

    if skill.platform == SkillPlatform.GEMINI:
        return ConversionTarget.CLAUDE
    return ConversionTarget.GEMINI


def build_convert_command(
    input_path: str,
    target: Union[ConversionTarget, str],
    output_dir: str = "",
) -> list[str]:
    """Build the argument list for ``skill-porter convert``.

    Returns ``["convert", input_path, "--to", <target>]`` followed by
    ``["--output", output_dir]`` when an output directory is given.

    Raises:
        InvalidInputError: ``input_path`` is empty
        UnresolvedTargetError: ``target`` is AUTO
        UnsupportedTargetError: ``target`` is not Gemini or Claude
    """
    if not input_path:
        raise InvalidInputError("input path is required")

    name = target.value if isinstance(target, ConversionTarget) else str(target)
    normalized = name.lower()

    if normalized == ConversionTarget.AUTO.value.lower():
        raise UnresolvedTargetError("cannot build command for 'Auto' target; must be resolved")
    if normalized not in _SUPPORTED_TARGETS:
        raise UnsupportedTargetError(f"unsupported target: {name}")

    args = ["convert", input_path, "--to", normalized]
    if output_dir:
        args.extend(["--output", output_dir])
    return args
