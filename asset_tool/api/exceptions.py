"""Exception definitions for asset-tool API"""

from pathlib import Path
from typing import Optional

from ..constants import ErrorCode


class AssetToolError(Exception):
    """Base exception for asset-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(AssetToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class ProjectNotFoundError(AssetToolError):
    """Project root not found error"""

    def __init__(self, message: str = None):
        if message is None:
            message = (
                "No project root found. Please ensure:\n"
                "1. You are inside the host repository\n"
                "2. The repository root contains .asset-tool.yaml or .git\n"
                "3. Or use --project-root parameter to specify project location"
            )
        super().__init__(message, ErrorCode.PROJECT_NOT_FOUND)


class UpgradeError(AssetToolError):
    """Upgrade pipeline error"""
    pass


class NetworkError(UpgradeError):
    """Transport level failure talking to the upstream"""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message, ErrorCode.NETWORK_ERROR)
        self.url = url


class UnexpectedStatusError(UpgradeError):
    """Upstream answered with a status code the step does not accept"""

    def __init__(self, step: str, status_code: int, expected: int, url: Optional[str] = None):
        message = (
            f"{step}: expected a {expected} status code "
            f"but instead got {status_code}"
        )
        super().__init__(message, ErrorCode.UNEXPECTED_STATUS)
        self.step = step
        self.status_code = status_code
        self.expected = expected
        self.url = url


class ReleaseFormatError(UpgradeError):
    """Release metadata could not be understood"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.RELEASE_FORMAT_ERROR)


class MissingArtifactError(UpgradeError):
    """Release exists but carries no asset of the required type"""

    def __init__(self, version: str, content_type: str):
        message = (
            f"Couldn't find any {content_type} assets in the {version!r} release. "
            "Maybe the maintainer forgot to add one or the content type has changed. "
            "Please check the releases page of the repository and/or contact the maintainer."
        )
        super().__init__(message, ErrorCode.MISSING_ARTIFACT)
        self.version = version
        self.content_type = content_type


class SyncError(AssetToolError):
    """Vendor directory synchronization error"""
    pass


class ArchiveError(SyncError):
    """Archive is unreadable or contains an unsafe entry"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.ARCHIVE_ERROR)


class VersionMismatchError(SyncError):
    """Extracted release does not carry the requested version"""

    def __init__(self, expected: str, actual: Optional[str], staging_dir: Optional[Path] = None):
        message = (
            f"Expected the archive to contain release {expected!r}, "
            f"but instead it contained {actual!r}."
        )
        if staging_dir is not None:
            message += f" Extracted files were left in {staging_dir} for investigation."
        super().__init__(message, ErrorCode.VERSION_MISMATCH)
        self.expected = expected
        self.actual = actual
        self.staging_dir = staging_dir


class RewriteError(SyncError):
    """Resource rewrite left its pattern in place"""

    def __init__(self, file_path: Path, pattern: str):
        message = f"Pattern {pattern!r} is still present in {file_path} after rewrite"
        super().__init__(message, ErrorCode.REWRITE_FAILED)
        self.file_path = file_path
        self.pattern = pattern


class BuildError(AssetToolError):
    """Build pipeline error"""
    pass


class TemplateIdError(BuildError):
    """Template fragment with a duplicate or missing id"""

    def __init__(self, message: str, template_id: Optional[str] = None):
        super().__init__(message, ErrorCode.TEMPLATE_ID_ERROR)
        self.template_id = template_id


class ScriptEngineError(BuildError):
    """JavaScript evaluation failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.SCRIPT_ENGINE_ERROR)


class StylesheetError(BuildError):
    """Stylesheet compilation failed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.STYLESHEET_ERROR)
