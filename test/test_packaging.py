import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _project() -> dict:
    with open(ROOT / "pyproject.toml", "rb") as f:
        return tomllib.load(f)


def test_declared_modules_and_packages_exist():
    setuptools = _project()["tool"]["setuptools"]
    for module in setuptools["py-modules"]:
        assert (ROOT / f"{module}.py").is_file(), module
    for package in setuptools["packages"]:
        assert (ROOT / package.replace(".", "/") / "__init__.py").is_file(), package


def test_readme_is_not_the_design_ledger():
    project = _project()["project"]
    assert project.get("readme") != "DESIGN.md"
