"""Test basic package import and version."""

from pathlib import Path


def test_import() -> None:
    import cobalt

    assert cobalt.__version__


def test_version_matches_pyproject() -> None:
    import tomllib

    import cobalt

    pyproject = Path(__file__).parent.parent / "pyproject.toml"
    with pyproject.open("rb") as f:
        expected = tomllib.load(f)["project"]["version"]
    assert cobalt.__version__ == expected


def test_version_format() -> None:
    from cobalt import __version__

    parts = __version__.split(".")
    assert len(parts) == 3
    assert all(part.isdigit() for part in parts)
