"""Checks on the project metadata in pyproject.toml."""

from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


@pytest.fixture(scope="module")
def project() -> dict:
    with PYPROJECT.open("rb") as fh:
        return tomllib.load(fh)["project"]


def test_design_notes_are_not_the_long_description(project):
    assert project.get("readme") != "DESIGN.md"


def test_runtime_dependencies_declared(project):
    names = {dep.split(">")[0].split("=")[0].strip().lower() for dep in project["dependencies"]}
    assert {"fastapi", "pydantic", "uvicorn", "requests", "faker"} <= names
