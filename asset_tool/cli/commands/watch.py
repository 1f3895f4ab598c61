"""Development watcher command"""

import logging
import re
import subprocess
import threading
import time
from pathlib import Path
from typing import Callable, List, Optional

import click
from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from ..decorators import project_required, handle_errors
from ..utils.output import console, print_error, print_info
from ...api.exceptions import AssetToolError
from ...constants import WATCH_DEBOUNCE_SECONDS
from ...services.build_service import BuildService

logger = logging.getLogger(__name__)


class BuildEventHandler(FileSystemEventHandler):
    """Runs a rebuild once watched assets stop changing

    Events for hidden files and for paths matching an ignore pattern are
    dropped. Every other event restarts the debounce timer, and the rebuild
    runs when no event arrived for `delay` seconds, so the last change of a
    burst is always built. Rebuilds never overlap.
    """

    def __init__(self,
                 rebuild: Callable[[], None],
                 ignore: List[str],
                 delay: float = WATCH_DEBOUNCE_SECONDS):
        self.rebuild = rebuild
        self.ignore = [re.compile(pattern) for pattern in ignore]
        self.delay = delay
        self._pending: Optional[str] = None
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()
        self._build_lock = threading.Lock()

    def is_ignored(self, path: str) -> bool:
        if Path(path).name.startswith("."):
            return True
        return any(pattern.search(path) for pattern in self.ignore)

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type in ("opened", "closed", "closed_no_write"):
            return

        paths = [event.src_path]
        if getattr(event, "dest_path", ""):
            paths.append(event.dest_path)
        if all(self.is_ignored(str(p)) for p in paths):
            return

        self.schedule(str(paths[-1]))

    def schedule(self, path: str) -> None:
        """Remember a change and (re)start the debounce timer"""
        with self._lock:
            self._pending = path
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            if self.delay > 0:
                self._timer = threading.Timer(self.delay, self.flush)
                self._timer.daemon = True
                self._timer.start()
                return

        self.flush()

    def flush(self) -> None:
        """Rebuild now if a change is pending"""
        with self._lock:
            path, self._pending = self._pending, None
            timer, self._timer = self._timer, None
        if timer is not None and timer is not threading.current_thread():
            timer.cancel()
        if path is None:
            return

        with self._build_lock:
            console.print(f"[dim]Change detected in {path}[/dim]")
            self.run_build()

    def cancel(self) -> None:
        """Drop a pending change without rebuilding"""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def run_build(self) -> None:
        """Run one rebuild, reporting failures without stopping the watcher"""
        try:
            self.rebuild()
        except (AssetToolError, OSError) as e:
            print_error("Rebuild failed", e)


@click.command()
@click.option(
    '--serve', '-s', 'serve_command',
    help='Preview server command to run while watching (overrides dev.serve_command)'
)
@click.option(
    '--no-initial-build',
    is_flag=True,
    help='Do not build before starting to watch'
)
@click.pass_obj
@handle_errors
@project_required
def watch(obj, serve_command: Optional[str], no_initial_build: bool):
    """Rebuild UI assets whenever a file in the asset directory changes

    Examples:
        asset-tool watch
        asset-tool watch --serve "cd website && bundle exec rackup"
    """
    path_resolver = obj.path_resolver
    dev = path_resolver.config.dev
    serve_command = serve_command or dev.serve_command
    watch_dir = path_resolver.get_assets_dir()
    service = BuildService(path_resolver)

    def rebuild() -> None:
        console.print("Assets change detected; updating asset version and recompiling templates... ", end="")
        result = service.build()
        console.print(f"Done ({result.asset_version})")

    handler = BuildEventHandler(rebuild, dev.ignore)

    if not no_initial_build:
        handler.run_build()

    observer = Observer()
    observer.schedule(handler, str(watch_dir), recursive=True)
    observer.start()
    print_info(f"Watching {path_resolver.make_relative(watch_dir)} for changes (Ctrl-C to stop)")

    process = None
    try:
        if serve_command:
            logger.info("Starting preview server: %s", serve_command)
            process = subprocess.Popen(serve_command, shell=True, cwd=path_resolver.project_root)
            process.wait()
        else:
            while observer.is_alive():
                time.sleep(1)
    finally:
        if process is not None and process.poll() is None:
            process.terminate()
        observer.stop()
        observer.join()
        handler.cancel()
