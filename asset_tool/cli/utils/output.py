# asset_tool/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from ...api.exceptions import AssetToolError
from ...constants import EMOJI_ERROR, EMOJI_WARNING, EMOJI_INFO, EMOJI_SUCCESS
from ...models import UpgradeResult, BuildResult
from ...utils.file_utils import format_size

console = Console()


def format_upgrade_result(result: UpgradeResult) -> None:
    """Format and display upgrade operation result"""
    if result.is_skipped:
        console.print(result.message)
        return

    lines = [
        f"[green]{result.message}[/green]",
        "",
        f"[bold]Previous:[/bold] {result.previous_version or 'none'}",
        f"[bold]Latest:[/bold] {result.latest_version}",
    ]

    if result.archive_size:
        lines.append(f"[bold]Archive:[/bold] {format_size(result.archive_size)}")

    if result.sync:
        lines.append(
            f"[bold]Files:[/bold] {len(result.sync.extracted)} extracted, "
            f"{len(result.sync.removed)} removed, {len(result.sync.kept)} kept"
        )

    if result.build:
        lines.append(f"[bold]Asset version:[/bold] {result.build.asset_version}")

    console.print(Panel("\n".join(lines), title="Upgrade Result", border_style="green"))

    for warning in result.warnings:
        print_warning(warning)


def format_build_result(result: BuildResult) -> None:
    """Format and display build operation result"""
    lines = [f"[green]{result.message}[/green]", ""]

    if result.css_path:
        lines.append(f"[bold]Stylesheet:[/bold] {result.css_path}")
    lines.append(f"[bold]Bundle:[/bold] {result.bundle_path}")
    lines.append(f"[bold]Templates:[/bold] {', '.join(result.templates) or 'none'}")
    lines.append(f"[bold]Version file:[/bold] {result.asset_version_path}")

    console.print(Panel("\n".join(lines), title="Build Result", border_style="green"))

    for warning in result.warnings:
        print_warning(warning)


def print_tool_error(error: AssetToolError) -> None:
    """Print a tool error with its code"""
    code = f"[dim]({error.error_code})[/dim] " if error.error_code else ""
    console.print(f"{EMOJI_ERROR} [red]Error:[/red] {code}{escape(str(error))}")


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {escape(str(error))}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"{EMOJI_WARNING} [yellow]Warning:[/yellow] {escape(message)}")


def print_info(message: str) -> None:
    """Print info message"""
    console.print(f"{EMOJI_INFO} [blue]Info:[/blue] {message}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"{EMOJI_SUCCESS} [green]Success:[/green] {message}")
