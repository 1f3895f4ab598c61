"""Global constants for asset-tool"""

APP_NAME = "asset-tool"
LOG_FORMAT = "%(message)s"

# Version related
CONFIG_VERSION = "1.0"

# Project identification
PROJECT_CONFIG_FILE = ".asset-tool.yaml"
PROJECT_MARKERS = [
    PROJECT_CONFIG_FILE,
    ".git"
]

# Upstream release source
GITHUB_API_URL = "https://api.github.com"
DEFAULT_UPSTREAM_REPO = "jlfwong/speedscope"
RELEASES_LATEST_PATH = "/repos/{repo}/releases/latest"
RELEASE_ASSET_PATH = "/repos/{repo}/releases/assets/{asset_id}"
RELEASE_ACCEPT_HEADER = "application/vnd.github.v3+json"
DOWNLOAD_ACCEPT_HEADER = "application/octet-stream"
ARCHIVE_CONTENT_TYPE = "application/zip"
DOWNLOAD_REDIRECT_STATUS = 302
USER_AGENT = "asset-tool (+https://github.com/MiniProfiler/rack-mini-profiler)"
DEFAULT_CHUNK_SIZE = 1024 * 1024  # 1MB

# Vendor directory layout
DEFAULT_VENDOR_DIR = "lib/html/speedscope"
DEFAULT_ARCHIVE_PREFIX = "speedscope/"
KEPT_FILES_MANIFEST = ".kept-files"
KEPT_FILES_COMMENT = "//"
VERSION_MARKER_FILE = "release.txt"
VERSION_MARKER_DELIMITER = "@"
STAGING_DIR_PREFIX = ".staging-"
BACKUP_DIR_SUFFIX = ".previous"

# Archive entries whose path contains any of these fragments are never
# vendored: the upstream readme and the large sample profile shipped with it.
DEFAULT_ARCHIVE_EXCLUDES = [
    "perf-vertx-stacks",
    "README",
]

# Resource rewrite applied to the vendored entry page
DEFAULT_REWRITE_FILE = "index.html"
DEFAULT_REWRITE_PATTERN = "https://fonts.googleapis.com/css?family=Source+Code+Pro"
DEFAULT_REWRITE_REPLACEMENT = "fonts/source-code-pro-regular.css"

# UI assets
DEFAULT_ASSETS_DIR = "lib/html"
DEFAULT_ASSET_EXTENSIONS = ["js", "html", "css", "tmpl"]
DEFAULT_ASSET_VERSION_FILE = "lib/mini_profiler/asset_version.rb"
DEFAULT_CONSTANT_NAME = "ASSET_VERSION"
DEFAULT_SCSS_SOURCE = "lib/html/includes.scss"
DEFAULT_CSS_OUTPUT = "lib/html/includes.css"
HASH_ALGORITHM = "md5"
HASH_CHUNK_SIZE = 8192

ASSET_VERSION_TEMPLATE = """# frozen_string_literal: true
module Rack
  class MiniProfiler
    {constant} = '{version}'
  end
end
"""

PYTHON_ASSET_VERSION_TEMPLATE = """# This file is generated by asset-tool. Do not edit.
{constant} = '{version}'
"""

# Templates and generated bundle
DEFAULT_TEMPLATE_SOURCE = "lib/html/includes.tmpl"
DEFAULT_ENGINE_SCRIPT = "lib/html/dot.1.1.2.min.js"
DEFAULT_STATIC_SCRIPT = "lib/html/pretty-print.js"
DEFAULT_BUNDLE_OUTPUT = "lib/html/vendor.js"
DEFAULT_TEMPLATE_NAMESPACE = "MiniProfiler"
TEMPLATE_SCRIPT_TYPE = "text/x-dot-tmpl"

BUNDLE_HEADER = """/**
  THIS FILE IS AUTOMATICALLY GENERATED BY `asset-tool write-vendor-js`.
  DON'T EDIT THIS FILE BY HAND; CHANGES WILL BE OVERRIDEN.
**/
"""

# Development watcher
DEFAULT_WATCH_IGNORE = [
    r"vendor\.js$",
    r"includes\.css$",
]
WATCH_DEBOUNCE_SECONDS = 0.5


# Error codes
class ErrorCode:
    CONFIG_FORMAT_ERROR = "AT001"
    PROJECT_NOT_FOUND = "AT002"
    NETWORK_ERROR = "AT101"
    UNEXPECTED_STATUS = "AT102"
    RELEASE_FORMAT_ERROR = "AT103"
    MISSING_ARTIFACT = "AT104"
    ARCHIVE_ERROR = "AT201"
    VERSION_MISMATCH = "AT202"
    REWRITE_FAILED = "AT203"
    TEMPLATE_ID_ERROR = "AT301"
    SCRIPT_ENGINE_ERROR = "AT302"
    STYLESHEET_ERROR = "AT303"


# Environment variables
ENV_CONFIG_PATH = "ASSET_TOOL_CONFIG"
ENV_LOG_LEVEL = "ASSET_TOOL_LOG_LEVEL"
ENV_GITHUB_TOKEN = "ASSET_TOOL_GITHUB_TOKEN"
ENV_GITHUB_TOKEN_FALLBACK = "GITHUB_TOKEN"


# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"
EMOJI_INFO = "ℹ"
EMOJI_ARROW = "→"

# Messages templates
MSG_ALREADY_LATEST = f"{EMOJI_INFO} Already on the latest version ({{version}})"
MSG_UPGRADE_SUCCESS = f"{EMOJI_SUCCESS} Upgraded {{name}}: {{old_version}} {EMOJI_ARROW} {{new_version}}"
MSG_BUILD_SUCCESS = f"{EMOJI_SUCCESS} Asset version: {{version}}"
