import pytest

from config import BIN_ENV, OUT_ENV, ROOT_ENV, Config, load_config, parse_target
from main import build_parser
from skills.types import ConversionTarget


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (ROOT_ENV, OUT_ENV, BIN_ENV):
        monkeypatch.delenv(name, raising=False)


def _load(*argv):
    return load_config(build_parser().parse_args(list(argv)))


def test_defaults(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = _load()

    assert config.scan_root == str(tmp_path)
    assert config.recursive is True
    assert config.default_target == ConversionTarget.AUTO
    assert config.out_base_dir == ""
    assert config.auto_convert is False
    assert config.converter == Config.SKILL_PORTER_BIN


def test_environment_is_used_without_flags(tmp_path, monkeypatch):
    out = tmp_path / "out"
    monkeypatch.setenv(ROOT_ENV, str(tmp_path))
    monkeypatch.setenv(OUT_ENV, str(out))
    monkeypatch.setenv(BIN_ENV, "/opt/bin/skill-porter")

    config = _load()

    assert config.scan_root == str(tmp_path)
    assert config.out_base_dir == str(out)
    assert out.is_dir()
    assert config.converter == "/opt/bin/skill-porter"


def test_flags_win_over_environment(tmp_path, monkeypatch):
    env_root = tmp_path / "env"
    flag_root = tmp_path / "flag"
    env_root.mkdir()
    flag_root.mkdir()
    monkeypatch.setenv(ROOT_ENV, str(env_root))
    monkeypatch.setenv(BIN_ENV, "from-env")

    config = _load("--root", str(flag_root), "--converter", "from-flag")

    assert config.scan_root == str(flag_root)
    assert config.converter == "from-flag"


def test_flags(tmp_path):
    config = _load(
        "--root", str(tmp_path), "--target", "claude", "--no-recursive", "--auto", "--debug"
    )

    assert config.default_target == ConversionTarget.CLAUDE
    assert config.recursive is False
    assert config.auto_convert is True
    assert config.debug is True


def test_relative_root_is_made_absolute(tmp_path, monkeypatch):
    (tmp_path / "skills").mkdir()
    monkeypatch.chdir(tmp_path)
    assert _load("--root", "skills").scan_root == str(tmp_path / "skills")


def test_invalid_target():
    with pytest.raises(ValueError, match="invalid target"):
        parse_target("codex")


def test_invalid_root(tmp_path):
    with pytest.raises(ValueError, match="invalid scan root"):
        _load("--root", str(tmp_path / "missing"))


def test_output_path_that_is_a_file(tmp_path):
    target = tmp_path / "out"
    target.write_text("x")
    with pytest.raises(ValueError):
        _load("--root", str(tmp_path), "--out", str(target))
