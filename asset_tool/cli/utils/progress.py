# asset_tool/cli/utils/progress.py
"""Progress display utilities"""

from contextlib import contextmanager
from typing import Generator, Optional

from rich.console import Console
from rich.progress import (
    Progress,
    TextColumn,
    BarColumn,
    DownloadColumn,
    TransferSpeedColumn,
    TimeRemainingColumn,
    TaskID,
)


class DownloadProgress:
    """Download progress bar fed by a fetcher callback

    The task is created on the first callback so that nothing is drawn
    when no download happens.
    """

    def __init__(self, progress: Progress, filename: str = "archive"):
        self.progress = progress
        self.filename = filename
        self._task: Optional[TaskID] = None

    def __call__(self, downloaded: int, total: Optional[int]) -> None:
        if self._task is None:
            self._task = self.progress.add_task("download", filename=self.filename, total=total)
        self.progress.update(self._task, completed=downloaded, total=total)


@contextmanager
def download_progress(console: Console, filename: str = "archive") -> Generator[DownloadProgress, None, None]:
    """Progress bar for archive downloads"""
    with Progress(
            TextColumn("[bold blue]{task.fields[filename]}", justify="right"),
            BarColumn(bar_width=None),
            "[progress.percentage]{task.percentage:>3.1f}%",
            "•",
            DownloadColumn(),
            "•",
            TransferSpeedColumn(),
            "•",
            TimeRemainingColumn(),
            console=console,
            transient=True,
    ) as progress:
        yield DownloadProgress(progress, filename)
