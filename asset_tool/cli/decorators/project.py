"""Project context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console, print_tool_error
from ...api.exceptions import AssetToolError


def project_required(func: Callable) -> Callable:
    """Decorator that resolves the project before the command runs

    The project root and configuration are loaded eagerly so that a
    missing project or a broken configuration file is reported before any
    work starts.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            ctx.obj.path_resolver
        except AssetToolError as e:
            print_tool_error(e)
            ctx.exit(1)

        return func(*args, **kwargs)

    return wrapper


def handle_errors(func: Callable) -> Callable:
    """Decorator that turns tool errors into exit codes

    AssetToolError exits with status 1 and Ctrl-C with status 130. Any
    other exception propagates to the entry point.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            return func(*args, **kwargs)
        except AssetToolError as e:
            print_tool_error(e)
            if ctx.obj is not None and ctx.obj.debug:
                console.print_exception()
            ctx.exit(1)
        except KeyboardInterrupt:
            click.echo("\nOperation cancelled by user", err=True)
            ctx.exit(130)

    return wrapper
