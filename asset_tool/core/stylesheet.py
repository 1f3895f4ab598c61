"""Stylesheet preprocessing"""

import logging
from pathlib import Path

import sass

from ..api.exceptions import StylesheetError
from ..utils.file_utils import atomic_write

logger = logging.getLogger(__name__)


class StylesheetCompiler:
    """Compiles the SCSS source of the UI to plain CSS"""

    def __init__(self, output_style: str = "nested"):
        self.output_style = output_style

    def compile(self, scss_path: Path, css_path: Path) -> Path:
        """
        Compile one SCSS file

        Args:
            scss_path: SCSS source
            css_path: CSS output, overwritten

        Returns:
            Path of the written CSS file

        Raises:
            StylesheetError: If the SCSS does not compile
        """
        source = scss_path.read_text(encoding="utf-8")

        try:
            css = sass.compile(
                string=source,
                output_style=self.output_style,
                include_paths=[str(scss_path.parent)]
            )
        except sass.CompileError as e:
            raise StylesheetError(f"Failed to compile {scss_path}: {e}") from e

        atomic_write(css_path, css)
        logger.info("Compiled %s to %s", scss_path, css_path)
        return css_path
