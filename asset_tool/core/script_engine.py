"""Embedded JavaScript engine handle"""

import logging
from pathlib import Path
from typing import Any, Optional, Set

from py_mini_racer import MiniRacer

from ..api.exceptions import ScriptEngineError

logger = logging.getLogger(__name__)


class ScriptEngine:
    """Single-owner handle around one V8 context

    Starting V8 is the expensive part of compiling a template, so one engine
    is opened per build run and passed to every compile call. The handle is
    not shared between builds and is closed when the build finishes.

    Example:
        with ScriptEngine() as engine:
            engine.load(Path("dot.min.js"))
            engine.eval("doT.compile('{{=it.name}}').toString()")
    """

    def __init__(self):
        self._context: Optional[MiniRacer] = None
        self._loaded: Set[Path] = set()

    def __enter__(self) -> 'ScriptEngine':
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._context is not None

    def open(self) -> None:
        if self._context is None:
            logger.debug("Starting JavaScript engine")
            self._context = MiniRacer()

    def close(self) -> None:
        if self._context is not None:
            self._context.close()
            self._context = None
            self._loaded.clear()

    def eval(self, source: str) -> Any:
        """
        Evaluate JavaScript source in the engine context

        Args:
            source: JavaScript code

        Returns:
            Result converted to a Python value

        Raises:
            ScriptEngineError: If the engine is closed or evaluation fails
        """
        if self._context is None:
            raise ScriptEngineError("JavaScript engine is not open")

        try:
            return self._context.eval(source)
        except Exception as e:
            raise ScriptEngineError(f"JavaScript evaluation failed: {e}") from e

    def load(self, script_path: Path) -> None:
        """
        Evaluate a library file once per engine

        Args:
            script_path: JavaScript file to load
        """
        script_path = Path(script_path).resolve()
        if script_path in self._loaded:
            return

        self.eval(script_path.read_text(encoding="utf-8"))
        self._loaded.add(script_path)
        logger.debug("Loaded %s into JavaScript engine", script_path.name)
