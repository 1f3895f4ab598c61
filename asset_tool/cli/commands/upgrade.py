"""Upgrade command implementation"""

import click

from ..decorators import project_required, handle_errors
from ..utils.output import console, format_upgrade_result
from ..utils.progress import download_progress
from ...services.upgrade_service import UpgradeService

# Width of the action column in file operation lines
ACTION_WIDTH = 9


@click.command()
@click.option(
    '--force', '-f',
    is_flag=True,
    help='Re-install even when already on the latest version'
)
@click.option(
    '--build', '-b', 'build_after',
    is_flag=True,
    help='Rebuild UI assets after upgrading'
)
@click.pass_obj
@handle_errors
@project_required
def upgrade(obj, force, build_after):
    """Upgrade the vendored speedscope copy to the latest release

    Files listed in the vendor directory's .kept-files manifest survive
    the upgrade. The live directory is only replaced once the new copy is
    complete and its version matches the release.

    Examples:
        asset-tool upgrade
        asset-tool upgrade --force --build
    """
    path_resolver = obj.path_resolver

    def on_sync(action: str, message: str) -> None:
        console.print(f"[dim]{action.rjust(ACTION_WIDTH)}[/dim] {message}")

    with download_progress(console, filename=path_resolver.config.vendor.name) as on_download:
        service = UpgradeService(
            path_resolver,
            step_callback=console.print,
            sync_callback=on_sync,
            download_callback=on_download
        )
        result = service.upgrade(force=force, build_after=build_after)

    format_upgrade_result(result)
