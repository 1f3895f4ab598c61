"""UI asset build pipeline"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from ..core.path_resolver import PathResolver
from ..core.script_engine import ScriptEngine
from ..core.template_compiler import TemplateCompiler
from ..core.bundle_builder import AssetBundleBuilder
from ..core.asset_version import AssetVersionBuilder
from ..core.stylesheet import StylesheetCompiler
from ..constants import MSG_BUILD_SUCCESS
from ..models.result import BuildResult, OperationStatus

logger = logging.getLogger(__name__)


class BuildService:
    """Rebuilds the generated UI assets and their version token

    The stylesheet is compiled first, then the template bundle is written,
    and the asset version is computed last so that it covers both.
    """

    def __init__(self, path_resolver: PathResolver):
        """
        Initialize build service

        Args:
            path_resolver: Path resolver carrying the tool configuration
        """
        self.path_resolver = path_resolver
        self.config = path_resolver.config

    def compile_css(self) -> Optional[Path]:
        """
        Compile the SCSS source

        Returns:
            CSS path, or None when no SCSS source is configured or present
        """
        scss_path = self.path_resolver.get_scss_source()
        if scss_path is None or not scss_path.exists():
            logger.info("No stylesheet source configured, skipping CSS compilation")
            return None

        return StylesheetCompiler().compile(scss_path, self.path_resolver.get_css_output())

    def write_vendor_js(self, engine: Optional[ScriptEngine] = None) -> Tuple[Path, list]:
        """
        Compile templates and write the vendor bundle

        Nothing is written unless every template compiled.

        Args:
            engine: Open engine to reuse; a new one is opened and closed
                for this call when omitted

        Returns:
            Tuple of (bundle path, compiled template ids)
        """
        templates = self.config.templates
        html_source = self.path_resolver.get_template_source().read_text(encoding="utf-8")
        static_script = self.path_resolver.get_static_script().read_text(encoding="utf-8")

        if engine is None:
            with ScriptEngine() as owned_engine:
                compiled = self._compile(owned_engine, html_source)
        else:
            compiled = self._compile(engine, html_source)

        builder = AssetBundleBuilder(namespace=templates.namespace)
        content = builder.build(compiled, static_script)
        bundle_path = builder.write(self.path_resolver.get_bundle_output(), content)
        return bundle_path, list(compiled)

    def _compile(self, engine: ScriptEngine, html_source: str) -> dict:
        engine.load(self.path_resolver.get_engine_script())
        return TemplateCompiler(engine).compile(html_source)

    def update_asset_version(self) -> Tuple[str, Path, list]:
        """
        Recompute and write the asset version token

        Returns:
            Tuple of (token, constant file path, hashed file names)
        """
        assets = self.config.assets
        version_builder = AssetVersionBuilder(
            self.path_resolver.get_assets_dir(),
            extensions=assets.extensions,
            template=assets.template,
            constant_name=assets.constant_name
        )
        files = version_builder.collect_files()
        token = version_builder.build(files)
        path = version_builder.write(token, self.path_resolver.get_asset_version_file())
        return token, path, [f.name for f in files]

    def build(self, engine: Optional[ScriptEngine] = None) -> BuildResult:
        """
        Execute the full build pipeline

        Args:
            engine: Open engine to reuse across repeated builds

        Returns:
            BuildResult with generated paths and the asset version
        """
        result = BuildResult()

        result.css_path = self.compile_css()
        if result.css_path is None:
            result.add_warning("Stylesheet compilation skipped")

        result.bundle_path, result.templates = self.write_vendor_js(engine)
        result.asset_version, result.asset_version_path, result.hashed_files = self.update_asset_version()

        result.complete(OperationStatus.SUCCESS, MSG_BUILD_SUCCESS.format(version=result.asset_version))
        return result
