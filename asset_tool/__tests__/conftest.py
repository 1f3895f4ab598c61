import zipfile
from pathlib import Path
from typing import Callable, Dict, Optional

import pytest

from asset_tool.__tests__.common import FakeEngine, speedscope_entries
from asset_tool.core.path_resolver import PathResolver
from asset_tool.models.config import ToolConfig


@pytest.fixture
def fake_engine() -> FakeEngine:
    return FakeEngine()


@pytest.fixture
def make_archive(tmp_path: Path) -> Callable[..., Path]:
    """Build a zip archive from a name to content mapping"""

    def _make(entries: Optional[Dict[str, str]] = None, name: str = "release.zip") -> Path:
        if entries is None:
            entries = speedscope_entries()
        archive_path = tmp_path / "archives" / name
        archive_path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive_path, "w") as archive:
            for entry_name, content in entries.items():
                if entry_name.endswith("/"):
                    archive.writestr(zipfile.ZipInfo(entry_name), "")
                else:
                    archive.writestr(entry_name, content)
        return archive_path

    return _make


@pytest.fixture
def vendor_dir(tmp_path: Path) -> Path:
    """Live vendor directory of an installed 1.4.0 release"""
    directory = tmp_path / "project" / "lib" / "html" / "speedscope"
    directory.mkdir(parents=True)
    (directory / ".kept-files").write_text(
        "// Files listed here survive upgrades\n"
        "\n"
        "LICENSE\n"
        "fonts\n"
    )
    (directory / "LICENSE").write_text("MIT")
    (directory / "fonts").mkdir()
    (directory / "fonts" / "source-code-pro-regular.css").write_text("@font-face {}")
    (directory / "release.txt").write_text("speedscope@1.4.0\n")
    (directory / "index.html").write_text("<html>old</html>")
    (directory / "old-bundle.js").write_text("old")
    return directory


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Host repository with the default asset layout"""
    root = tmp_path / "project"
    html = root / "lib" / "html"
    html.mkdir(parents=True, exist_ok=True)
    (root / ".git").mkdir(exist_ok=True)

    (html / "includes.tmpl").write_text(
        '<script id="profilerTemplate" type="text/x-dot-tmpl">\n'
        '  <div class="profiler-result">{{= it.name }}</div>\n'
        '</script>\n'
        '<script id="linksTemplate" type="text/x-dot-tmpl">\n'
        '  <a href="{{= it.url }}">`link`</a>\n'
        '</script>\n'
    )
    (html / "dot.1.1.2.min.js").write_text("var doT = {};")
    (html / "pretty-print.js").write_text("var prettyPrint = function() {};\n")
    (html / "includes.js").write_text("var MiniProfiler = {};")
    (html / "includes.css").write_text(".profiler-result { color: red; }")
    (root / "lib" / "mini_profiler").mkdir(parents=True, exist_ok=True)
    return root


@pytest.fixture
def path_resolver(project_root: Path) -> PathResolver:
    return PathResolver(project_root, ToolConfig())
