"""Generated vendor script bundle"""

import json
import logging
from pathlib import Path
from typing import Mapping

from ..constants import BUNDLE_HEADER, DEFAULT_TEMPLATE_NAMESPACE
from ..utils.file_utils import atomic_write

logger = logging.getLogger(__name__)


class AssetBundleBuilder:
    """Concatenates compiled templates and the static script into one file

    Output only depends on its inputs, so rebuilding with unchanged
    templates and script yields the same bytes and the same asset version.
    """

    def __init__(self, namespace: str = DEFAULT_TEMPLATE_NAMESPACE, header: str = BUNDLE_HEADER):
        self.namespace = namespace
        self.header = header

    def build(self, template_map: Mapping[str, str], static_script: str) -> str:
        """
        Render the bundle text

        Args:
            template_map: Template id to compiled function source, in output order
            static_script: Script appended verbatim

        Returns:
            Bundle source text
        """
        lines = [
            self.header,
            '"use strict";',
            f"{self.namespace}.templates = {{}};",
        ]
        for template_id, compiled in template_map.items():
            lines.append(f"{self.namespace}.templates[{json.dumps(template_id)}] = {compiled}")

        lines.append("")
        lines.append(static_script.rstrip("\n"))
        lines.append(f"{self.namespace}.loadedVendor = true;")
        return "\n".join(lines) + "\n"

    def write(self, output_path: Path, content: str) -> Path:
        """Overwrite the bundle file"""
        atomic_write(output_path, content)
        logger.info("Wrote %s (%d bytes)", output_path, len(content.encode("utf-8")))
        return output_path
