"""Project information command"""

import click
import yaml
from rich import box
from rich.syntax import Syntax
from rich.table import Table

from ..decorators import project_required, handle_errors
from ..utils.output import console
from ...core.release_resolver import ReleaseResolver
from ...core.vendor_syncer import VendorSyncer
from ...utils.http_utils import create_session, get_github_token


@click.command()
@click.option(
    '--show-config',
    is_flag=True,
    help='Print the effective configuration as YAML'
)
@click.option(
    '--remote', '-r',
    is_flag=True,
    help='Also look up the latest upstream release'
)
@click.pass_obj
@handle_errors
@project_required
def info(obj, show_config, remote):
    """Show vendored version and resolved paths"""
    path_resolver = obj.path_resolver
    config = path_resolver.config
    config_path = obj.config_service.config_path

    syncer = VendorSyncer(path_resolver.get_vendor_dir(), config.vendor)
    current = syncer.current_version()

    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Project root", str(path_resolver.project_root))
    table.add_row("Config file", str(config_path) if config_path.exists() else "[dim]defaults[/dim]")
    table.add_row("Upstream", config.upstream.repo)
    table.add_row("Vendor dir", str(path_resolver.make_relative(path_resolver.get_vendor_dir())))
    table.add_row("Vendored version", current or "[yellow]not installed[/yellow]")
    table.add_row("Kept files", ", ".join(sorted(syncer.load_kept_files())) or "[dim]none[/dim]")

    if remote:
        resolver = ReleaseResolver(
            config.upstream.repo,
            create_session(get_github_token()),
            content_type=config.upstream.archive_content_type,
            timeout=config.upstream.timeout
        )
        latest = resolver.latest().version
        style = "green" if latest == current else "yellow"
        table.add_row("Latest release", f"[{style}]{latest}[/{style}]")

    table.add_row("Bundle", str(path_resolver.make_relative(path_resolver.get_bundle_output())))
    table.add_row("Version file", str(path_resolver.make_relative(path_resolver.get_asset_version_file())))

    console.print(table)

    if show_config:
        yaml_str = yaml.dump(config.to_dict(), default_flow_style=False, sort_keys=False)
        console.print(Syntax(yaml_str, "yaml", theme="monokai", line_numbers=False))
