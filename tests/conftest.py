"""Shared pytest fixtures for the path-data test suite.

Fixtures:
    clean_config: Autouse; clears path-data environment overrides and the config singleton
    sample_svg: SVG document text with nested and attribute-less path elements
    svg_dir: Temporary directory holding two SVG files

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
"""

import pytest

from svg_editor.path_data.config import reset_config

ENV_OVERRIDES = ("PATH_DATA_PRECISION", "SVG_INPUT_DIR", "SVG_GLOB", "SVG_ENCODING", "ENVIRONMENT")

SAMPLE_SVG = """<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 100 100">
  <path id="outline" d="M 0 0 L 10 10 20 20"/>
  <g>
    <path id="inner" d="m 0 0 l 5 5 5 5"/>
    <g><path d="M 1 1"/></g>
  </g>
  <path id="no-data"/>
  <rect x="0" y="0" width="1" height="1"/>
</svg>
"""


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test against default configuration."""
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_svg():
    return SAMPLE_SVG


@pytest.fixture
def svg_dir(tmp_path):
    """Directory with a.svg (three paths) and b.svg (one path)."""
    (tmp_path / "a.svg").write_text(SAMPLE_SVG, encoding="utf-8")
    (tmp_path / "b.svg").write_text(
        '<svg xmlns="http://www.w3.org/2000/svg"><path id="b" d="M 2 2 l 1 1"/></svg>', encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("not an svg", encoding="utf-8")
    return tmp_path
