from pathlib import Path
from typing import Dict, Optional
from unittest.mock import MagicMock

from asset_tool.api.exceptions import ScriptEngineError

GOOGLE_FONTS_URL = "https://fonts.googleapis.com/css?family=Source+Code+Pro"


class FakeEngine:
    """Stands in for the V8 engine; records evaluated sources"""

    def __init__(self, fail_on: Optional[str] = None):
        self.sources = []
        self.loaded = []
        self.fail_on = fail_on

    def load(self, script_path: Path) -> None:
        self.loaded.append(Path(script_path))

    def eval(self, source: str) -> str:
        if self.fail_on is not None and self.fail_on in source:
            raise ScriptEngineError(f"JavaScript evaluation failed: {self.fail_on}")
        self.sources.append(source)
        return f"function anonymous(it) {{ /* {len(self.sources)} */ }}"


def speedscope_entries(version: str = "1.5.0") -> Dict[str, str]:
    return {
        "speedscope/": "",
        "speedscope/index.html": f'<link href="{GOOGLE_FONTS_URL}" rel="stylesheet">',
        "speedscope/release.txt": f"speedscope@{version}\nCommit: abc123\n",
        "speedscope/speedscope.js": "console.log('speedscope');",
        "speedscope/fonts/": "",
        "speedscope/fonts/source-code-pro-regular.woff2": "font",
        "speedscope/perf-vertx-stacks-01-collapsed-all.txt": "stacks",
        "speedscope/README": "readme",
        "other/ignored.txt": "outside prefix",
    }


def make_response(status_code: int = 200,
                  json_data=None,
                  headers: Optional[Dict[str, str]] = None,
                  chunks=None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.headers = headers or {}
    response.json.return_value = json_data
    response.iter_content.return_value = iter(chunks or [])
    return response
