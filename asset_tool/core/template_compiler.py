"""doT template extraction and compilation"""

import logging
from html.parser import HTMLParser
from typing import Dict, List, Optional, Tuple

from ..api.exceptions import TemplateIdError
from ..constants import TEMPLATE_SCRIPT_TYPE
from .script_engine import ScriptEngine

logger = logging.getLogger(__name__)


class _TemplateParser(HTMLParser):
    """Collects the id and raw text of template script nodes"""

    def __init__(self, script_type: str):
        super().__init__(convert_charrefs=False)
        self.script_type = script_type
        self.fragments: List[Tuple[Optional[str], str]] = []
        self._current_id: Optional[str] = None
        self._buffer: Optional[List[str]] = None

    def handle_starttag(self, tag, attrs):
        if tag != "script":
            return
        attributes = dict(attrs)
        if attributes.get("type") == self.script_type:
            self._current_id = attributes.get("id")
            self._buffer = []

    def handle_data(self, data):
        if self._buffer is not None:
            self._buffer.append(data)

    def handle_entityref(self, name):
        self.handle_data(f"&{name};")

    def handle_charref(self, name):
        self.handle_data(f"&#{name};")

    def handle_endtag(self, tag):
        if tag == "script" and self._buffer is not None:
            self.fragments.append((self._current_id, "".join(self._buffer)))
            self._current_id = None
            self._buffer = None


def extract_templates(html_source: str, script_type: str = TEMPLATE_SCRIPT_TYPE) -> Dict[str, str]:
    """
    Extract template fragments from an HTML document

    Args:
        html_source: Document containing ``<script type="text/x-dot-tmpl">`` nodes
        script_type: Script type marking a template fragment

    Returns:
        Template id to raw template source, in document order

    Raises:
        TemplateIdError: If any fragment has an empty, missing or duplicate id
    """
    parser = _TemplateParser(script_type)
    parser.feed(html_source)
    parser.close()

    templates: Dict[str, str] = {}
    for template_id, content in parser.fragments:
        if not template_id:
            raise TemplateIdError("Each template must have a unique id: found a template without id")
        if template_id in templates:
            raise TemplateIdError(
                f"Each template must have a unique id: {template_id!r} is used more than once",
                template_id=template_id
            )
        templates[template_id] = content

    return templates


def escape_backticks(source: str) -> str:
    """Escape back-ticks so source can sit inside a JavaScript template literal"""
    return source.replace("`", "\\`")


class TemplateCompiler:
    """Compiles doT templates to serialized JavaScript functions"""

    def __init__(self, engine: ScriptEngine, script_type: str = TEMPLATE_SCRIPT_TYPE):
        """
        Initialize template compiler

        Args:
            engine: Open engine with the doT library loaded
            script_type: Script type marking a template fragment
        """
        self.engine = engine
        self.script_type = script_type

    def compile_template(self, source: str) -> str:
        """Compile one template body and return the function source"""
        return self.engine.eval(f"doT.compile(`{escape_backticks(source)}`).toString()")

    def compile(self, html_source: str) -> Dict[str, str]:
        """
        Compile every template fragment of a document

        All ids are validated before the first template is compiled.

        Args:
            html_source: Document containing the template fragments

        Returns:
            Template id to compiled function source, in document order

        Raises:
            TemplateIdError: On an empty, missing or duplicate id
            ScriptEngineError: If doT fails to compile a template
        """
        templates = extract_templates(html_source, self.script_type)

        compiled = {}
        for template_id, source in templates.items():
            compiled[template_id] = self.compile_template(source)
            logger.debug("Compiled template %s", template_id)

        logger.info("Compiled %d templates", len(compiled))
        return compiled
