"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import (
    CONFIG_VERSION,
    DEFAULT_UPSTREAM_REPO,
    ARCHIVE_CONTENT_TYPE,
    DEFAULT_VENDOR_DIR,
    DEFAULT_ARCHIVE_PREFIX,
    DEFAULT_ARCHIVE_EXCLUDES,
    KEPT_FILES_MANIFEST,
    VERSION_MARKER_FILE,
    VERSION_MARKER_DELIMITER,
    DEFAULT_REWRITE_FILE,
    DEFAULT_REWRITE_PATTERN,
    DEFAULT_REWRITE_REPLACEMENT,
    DEFAULT_ASSETS_DIR,
    DEFAULT_ASSET_EXTENSIONS,
    DEFAULT_ASSET_VERSION_FILE,
    DEFAULT_CONSTANT_NAME,
    DEFAULT_SCSS_SOURCE,
    DEFAULT_CSS_OUTPUT,
    ASSET_VERSION_TEMPLATE,
    DEFAULT_TEMPLATE_SOURCE,
    DEFAULT_ENGINE_SCRIPT,
    DEFAULT_STATIC_SCRIPT,
    DEFAULT_BUNDLE_OUTPUT,
    DEFAULT_TEMPLATE_NAMESPACE,
    DEFAULT_WATCH_IGNORE,
)


@dataclass(frozen=True)
class RewriteRule:
    """Literal substitution applied to one vendored file after extraction"""

    file: str
    pattern: str
    replacement: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "file": self.file,
            "pattern": self.pattern,
            "replacement": self.replacement
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RewriteRule':
        """Create from dictionary"""
        return cls(
            file=data["file"],
            pattern=data["pattern"],
            replacement=data["replacement"]
        )


def _default_rewrites() -> List[RewriteRule]:
    return [
        RewriteRule(
            file=DEFAULT_REWRITE_FILE,
            pattern=DEFAULT_REWRITE_PATTERN,
            replacement=DEFAULT_REWRITE_REPLACEMENT
        )
    ]


@dataclass
class UpstreamConfig:
    """Where the vendored library is released"""

    repo: str = DEFAULT_UPSTREAM_REPO
    archive_content_type: str = ARCHIVE_CONTENT_TYPE
    timeout: Optional[float] = None  # transport default

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "repo": self.repo,
            "archive_content_type": self.archive_content_type,
            "timeout": self.timeout
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UpstreamConfig':
        """Create from dictionary"""
        return cls(
            repo=data.get("repo", DEFAULT_UPSTREAM_REPO),
            archive_content_type=data.get("archive_content_type", ARCHIVE_CONTENT_TYPE),
            timeout=data.get("timeout")
        )


@dataclass
class VendorConfig:
    """Vendor directory layout and extraction policy"""

    path: str = DEFAULT_VENDOR_DIR
    archive_prefix: str = DEFAULT_ARCHIVE_PREFIX
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_ARCHIVE_EXCLUDES))
    kept_files: str = KEPT_FILES_MANIFEST
    version_file: str = VERSION_MARKER_FILE
    version_delimiter: str = VERSION_MARKER_DELIMITER
    rewrites: List[RewriteRule] = field(default_factory=_default_rewrites)

    def __post_init__(self):
        """Validate vendor configuration"""
        if not self.archive_prefix.endswith("/"):
            self.archive_prefix = f"{self.archive_prefix}/"
        if not self.version_delimiter:
            raise ValueError("vendor.version_delimiter must not be empty")

    @property
    def name(self) -> str:
        """Name of the vendored library, taken from its directory"""
        return self.archive_prefix.rstrip("/")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "path": self.path,
            "archive_prefix": self.archive_prefix,
            "exclude": list(self.exclude),
            "kept_files": self.kept_files,
            "version_file": self.version_file,
            "version_delimiter": self.version_delimiter,
            "rewrites": [rule.to_dict() for rule in self.rewrites]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VendorConfig':
        """Create from dictionary"""
        config = cls()
        for key in ("path", "archive_prefix", "kept_files", "version_file", "version_delimiter"):
            if key in data:
                setattr(config, key, data[key])
        if "exclude" in data:
            config.exclude = list(data["exclude"] or [])
        if "rewrites" in data:
            config.rewrites = [RewriteRule.from_dict(item) for item in data["rewrites"] or []]
        config.__post_init__()
        return config


@dataclass
class AssetsConfig:
    """UI assets covered by the asset version token"""

    path: str = DEFAULT_ASSETS_DIR
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_ASSET_EXTENSIONS))
    version_file: str = DEFAULT_ASSET_VERSION_FILE
    constant_name: str = DEFAULT_CONSTANT_NAME
    template: str = ASSET_VERSION_TEMPLATE
    scss: Optional[str] = DEFAULT_SCSS_SOURCE
    css: str = DEFAULT_CSS_OUTPUT

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "path": self.path,
            "extensions": list(self.extensions),
            "version_file": self.version_file,
            "constant_name": self.constant_name,
            "template": self.template,
            "scss": self.scss,
            "css": self.css
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AssetsConfig':
        """Create from dictionary"""
        return cls(
            path=data.get("path", DEFAULT_ASSETS_DIR),
            extensions=[ext.lstrip(".") for ext in data.get("extensions", DEFAULT_ASSET_EXTENSIONS)],
            version_file=data.get("version_file", DEFAULT_ASSET_VERSION_FILE),
            constant_name=data.get("constant_name", DEFAULT_CONSTANT_NAME),
            template=data.get("template", ASSET_VERSION_TEMPLATE),
            scss=data.get("scss", DEFAULT_SCSS_SOURCE),
            css=data.get("css", DEFAULT_CSS_OUTPUT)
        )


@dataclass
class TemplatesConfig:
    """Template sources and generated bundle"""

    source: str = DEFAULT_TEMPLATE_SOURCE
    engine_script: str = DEFAULT_ENGINE_SCRIPT
    static_script: str = DEFAULT_STATIC_SCRIPT
    output: str = DEFAULT_BUNDLE_OUTPUT
    namespace: str = DEFAULT_TEMPLATE_NAMESPACE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "source": self.source,
            "engine_script": self.engine_script,
            "static_script": self.static_script,
            "output": self.output,
            "namespace": self.namespace
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TemplatesConfig':
        """Create from dictionary"""
        return cls(
            source=data.get("source", DEFAULT_TEMPLATE_SOURCE),
            engine_script=data.get("engine_script", DEFAULT_ENGINE_SCRIPT),
            static_script=data.get("static_script", DEFAULT_STATIC_SCRIPT),
            output=data.get("output", DEFAULT_BUNDLE_OUTPUT),
            namespace=data.get("namespace", DEFAULT_TEMPLATE_NAMESPACE)
        )


@dataclass
class DevConfig:
    """Development watcher settings"""

    serve_command: Optional[str] = None
    ignore: List[str] = field(default_factory=lambda: list(DEFAULT_WATCH_IGNORE))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "serve_command": self.serve_command,
            "ignore": list(self.ignore)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DevConfig':
        """Create from dictionary"""
        return cls(
            serve_command=data.get("serve_command"),
            ignore=list(data.get("ignore", DEFAULT_WATCH_IGNORE))
        )


@dataclass
class ToolConfig:
    """Complete asset-tool configuration

    This represents the configuration stored in .asset-tool.yaml. Every
    section is optional and falls back to the profiler's own layout.
    """

    version: str = CONFIG_VERSION
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    vendor: VendorConfig = field(default_factory=VendorConfig)
    assets: AssetsConfig = field(default_factory=AssetsConfig)
    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    dev: DevConfig = field(default_factory=DevConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "version": self.version,
            "upstream": self.upstream.to_dict(),
            "vendor": self.vendor.to_dict(),
            "assets": self.assets.to_dict(),
            "templates": self.templates.to_dict(),
            "dev": self.dev.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ToolConfig':
        """Create from dictionary"""
        data = data or {}
        return cls(
            version=str(data.get("version", CONFIG_VERSION)),
            upstream=UpstreamConfig.from_dict(data.get("upstream") or {}),
            vendor=VendorConfig.from_dict(data.get("vendor") or {}),
            assets=AssetsConfig.from_dict(data.get("assets") or {}),
            templates=TemplatesConfig.from_dict(data.get("templates") or {}),
            dev=DevConfig.from_dict(data.get("dev") or {})
        )
