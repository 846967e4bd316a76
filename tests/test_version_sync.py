from pathlib import Path
import tomllib

import checkkit

PYPROJECT = Path(__file__).resolve().parents[1] / "pyproject.toml"


def _project_table() -> dict[str, object]:
    with PYPROJECT.open("rb") as handle:
        return tomllib.load(handle)["project"]


def test_package_version_is_declared_once_in_pyproject() -> None:
    project = _project_table()

    assert project["name"] == "checkkit"
    assert checkkit.__version__ == project["version"]


def test_runtime_has_no_third_party_dependencies() -> None:
    project = _project_table()

    assert project["dependencies"] == []
    assert any(
        requirement.startswith("pytest")
        for requirement in project["optional-dependencies"]["test"]  # type: ignore[index]
    )
