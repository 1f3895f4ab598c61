"""Operation result models"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional


def _now() -> datetime:
    return datetime.now(timezone.utc)


class OperationStatus(Enum):
    """Operation status"""
    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IN_PROGRESS = "in_progress"


@dataclass
class Result:
    """Base result class"""

    status: OperationStatus = OperationStatus.IN_PROGRESS
    message: str = ""
    warnings: List[str] = field(default_factory=list)
    start_time: datetime = field(default_factory=_now)
    end_time: Optional[datetime] = None

    @property
    def is_success(self) -> bool:
        """Check if operation was successful"""
        return self.status == OperationStatus.SUCCESS

    @property
    def is_skipped(self) -> bool:
        """Check if operation had nothing to do"""
        return self.status == OperationStatus.SKIPPED

    @property
    def duration(self) -> Optional[float]:
        """Get operation duration in seconds"""
        if self.end_time:
            return (self.end_time - self.start_time).total_seconds()
        return None

    def add_warning(self, message: str) -> None:
        """Add a warning"""
        self.warnings.append(message)

    def complete(self, status: Optional[OperationStatus] = None, message: Optional[str] = None) -> None:
        """Mark operation as complete"""
        self.end_time = _now()
        self.status = status or OperationStatus.SUCCESS
        if message is not None:
            self.message = message


@dataclass
class SyncResult(Result):
    """Result of replacing the vendor directory with a release archive"""

    vendor_dir: Optional[Path] = None
    version: Optional[str] = None
    kept: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    extracted: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    rewritten: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "vendor_dir": str(self.vendor_dir) if self.vendor_dir else None,
            "version": self.version,
            "kept": self.kept,
            "removed": self.removed,
            "extracted": self.extracted,
            "skipped": self.skipped,
            "rewritten": self.rewritten,
            "warnings": self.warnings,
            "duration": self.duration
        }


@dataclass
class UpgradeResult(Result):
    """Result of the upgrade pipeline"""

    previous_version: Optional[str] = None
    latest_version: Optional[str] = None
    asset_id: Optional[Any] = None
    archive_size: Optional[int] = None
    sync: Optional[SyncResult] = None
    build: Optional['BuildResult'] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "status": self.status.value,
            "message": self.message,
            "previous_version": self.previous_version,
            "latest_version": self.latest_version,
            "asset_id": self.asset_id,
            "archive_size": self.archive_size,
            "warnings": self.warnings,
            "duration": self.duration
        }

        if self.sync:
            data["sync"] = self.sync.to_dict()
        if self.build:
            data["build"] = self.build.to_dict()

        return data


@dataclass
class BuildResult(Result):
    """Result of the build pipeline"""

    css_path: Optional[Path] = None
    bundle_path: Optional[Path] = None
    templates: List[str] = field(default_factory=list)
    asset_version: Optional[str] = None
    asset_version_path: Optional[Path] = None
    hashed_files: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "status": self.status.value,
            "message": self.message,
            "css_path": str(self.css_path) if self.css_path else None,
            "bundle_path": str(self.bundle_path) if self.bundle_path else None,
            "templates": self.templates,
            "asset_version": self.asset_version,
            "asset_version_path": str(self.asset_version_path) if self.asset_version_path else None,
            "hashed_files": self.hashed_files,
            "warnings": self.warnings,
            "duration": self.duration
        }
