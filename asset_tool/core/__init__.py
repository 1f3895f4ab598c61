"""Core functionality for asset-tool"""

from .path_resolver import PathResolver
from .release_resolver import ReleaseResolver
from .artifact_fetcher import ArtifactFetcher
from .resource_rewriter import ResourceRewriter
from .vendor_syncer import VendorSyncer, parse_kept_files
from .script_engine import ScriptEngine
from .template_compiler import TemplateCompiler, extract_templates
from .bundle_builder import AssetBundleBuilder
from .asset_version import AssetVersionBuilder
from .stylesheet import StylesheetCompiler

__all__ = [
    "PathResolver",
    "ReleaseResolver",
    "ArtifactFetcher",
    "ResourceRewriter",
    "VendorSyncer",
    "parse_kept_files",
    "ScriptEngine",
    "TemplateCompiler",
    "extract_templates",
    "AssetBundleBuilder",
    "AssetVersionBuilder",
    "StylesheetCompiler",
]
