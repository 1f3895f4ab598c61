"""Build command implementations"""

import click

from ..decorators import project_required, handle_errors
from ..utils.output import console, format_build_result, print_success, print_info
from ...services.build_service import BuildService


@click.command()
@click.pass_obj
@handle_errors
@project_required
def build(obj):
    """Rebuild all generated UI assets

    Compiles the stylesheet, writes the template bundle and then updates
    the asset version constant so that it covers both.
    """
    result = BuildService(obj.path_resolver).build()
    format_build_result(result)


@click.command(name='compile-css')
@click.pass_obj
@handle_errors
@project_required
def compile_css(obj):
    """Compile the SCSS stylesheet"""
    css_path = BuildService(obj.path_resolver).compile_css()
    if css_path is None:
        print_info("No stylesheet source configured, nothing to compile")
    else:
        print_success(f"Stylesheet written to {obj.path_resolver.make_relative(css_path)}")


@click.command(name='write-vendor-js')
@click.pass_obj
@handle_errors
@project_required
def write_vendor_js(obj):
    """Compile the HTML templates into the vendor bundle"""
    bundle_path, template_ids = BuildService(obj.path_resolver).write_vendor_js()
    for template_id in template_ids:
        console.print(f"  • {template_id}")
    print_success(
        f"Compiled {len(template_ids)} templates into {obj.path_resolver.make_relative(bundle_path)}"
    )


@click.command(name='update-asset-version')
@click.pass_obj
@handle_errors
@project_required
def update_asset_version(obj):
    """Recompute the asset version constant"""
    token, path, files = BuildService(obj.path_resolver).update_asset_version()
    if obj.verbose:
        for name in files:
            console.print(f"  • {name}")
    print_success(f"Asset version {token} written to {obj.path_resolver.make_relative(path)}")
