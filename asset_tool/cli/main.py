# asset_tool/cli/main.py
"""Main CLI entry point for asset-tool"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL
from ..core.path_resolver import PathResolver
from ..services.config_service import ConfigService
from ..models.config import ToolConfig

from .commands import (
    upgrade,
    build,
    watch,
    info
)

console = Console()


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Without -v or -d the level comes from ASSET_TOOL_LOG_LEVEL, falling
    back to WARNING.

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ]
    )

    # Adjust third-party loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("watchdog").setLevel(logging.WARNING)


class Context:
    """CLI context object with lazy project initialization

    The project root and configuration are only looked up when a command
    that needs them accesses `path_resolver`.
    """

    def __init__(self,
                 project_root: Optional[Path] = None,
                 config_path: Optional[Path] = None):
        """Initialize CLI context"""
        self._project_root = project_root
        self._config_path = config_path
        self._config: Optional[ToolConfig] = None
        self._path_resolver: Optional[PathResolver] = None
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def project_root(self) -> Path:
        """Get project root directory (lazy loading)

        Raises:
            ProjectNotFoundError: If no project marker is found upwards
        """
        if self._project_root is None:
            self._project_root = PathResolver.find_project_root()
            if self.debug:
                console.print(f"[dim]Project root: {self._project_root}[/dim]")
        return self._project_root

    @property
    def config_service(self) -> ConfigService:
        return ConfigService(self.project_root, self._config_path)

    @property
    def config(self) -> ToolConfig:
        """Get tool configuration (lazy loading)

        Raises:
            ConfigError: If the configuration file is invalid
        """
        if self._config is None:
            self._config = self.config_service.load_config()
        return self._config

    @property
    def path_resolver(self) -> PathResolver:
        """Get path resolver instance (lazy loading)"""
        if self._path_resolver is None:
            self._path_resolver = PathResolver(self.project_root, self.config)
        return self._path_resolver


@click.group(name=APP_NAME)
@click.version_option(__version__, prog_name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option(
    '--project-root',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Host repository root (default: search upwards for .asset-tool.yaml or .git)'
)
@click.option(
    '--config', 'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    help='Configuration file (default: .asset-tool.yaml in the project root)'
)
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root, config_path):
    """Asset Tool - Keep vendored UI assets up to date

    Upgrades the vendored speedscope bundle from its latest GitHub release
    and rebuilds the generated UI assets: the compiled stylesheet, the
    template bundle and the asset version token used for cache busting.
    """
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root, config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(upgrade.upgrade)
cli.add_command(build.build)
cli.add_command(build.compile_css)
cli.add_command(build.write_vendor_js)
cli.add_command(build.update_asset_version)
cli.add_command(watch.watch)
cli.add_command(info.info)


def main():
    """Console script entry point. Exits 130 on Ctrl-C and 1 on unexpected errors."""
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
