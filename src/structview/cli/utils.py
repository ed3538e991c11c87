"""
CLI Utilities - Shared helper functions for command line operations.

Formatted status printing plus the load-and-mount sequence every command
starts with. Loader failures become a red status line, never a traceback.
"""

from typing import Optional

import click

from ..config import ViewerSettings
from ..core.controller import DocumentRootController
from ..loading.loader import LoadError, load_document


def echo_error(message: str) -> None:
    """
    Print an error message with a red cross.

    Args:
        message (str): The error message to display.
    """
    click.echo(click.style(f"❌ {message}", fg="red"), err=True)


def echo_warning(message: str) -> None:
    """
    Print a warning message with a yellow alert symbol.

    Args:
        message (str): The warning message to display.
    """
    click.echo(click.style(f"⚠️  {message}", fg="yellow"))


def echo_info(message: str) -> None:
    """
    Print an informational message, dimmed.

    Args:
        message (str): The info message to display.
    """
    click.echo(click.style(f"   {message}", dim=True))


def get_settings(ctx: Optional[click.Context] = None) -> ViewerSettings:
    """Settings stored on the root click context, or defaults outside a CLI run."""
    ctx = ctx or click.get_current_context(silent=True)
    if ctx is not None:
        root_obj = ctx.find_root().obj
        if isinstance(root_obj, dict) and isinstance(root_obj.get("settings"), ViewerSettings):
            return root_obj["settings"]
    return ViewerSettings()


def resolve_source(source: Optional[str], settings: ViewerSettings) -> Optional[str]:
    """The explicit source, else the configured default; reports when neither exists."""
    if source:
        return source
    if settings.default_source:
        return settings.default_source
    echo_error("No document given and no default_source configured")
    click.echo("Pass a file path or URL, or set default_source in .structview/config.yaml.")
    return None


def open_document(
    source: Optional[str],
    controller: Optional[DocumentRootController] = None,
) -> Optional[DocumentRootController]:
    """
    Load ``source`` into a controller and mount its root.

    Args:
        source (Optional[str]): File path or URL; ``None`` uses the configured default.
        controller (Optional[DocumentRootController]): Reuse an existing session.

    Returns:
        Optional[DocumentRootController]: The controller, or None if loading failed.
    """
    settings = get_settings()
    source = resolve_source(source, settings)
    if source is None:
        return None

    # JSON null is a document too; it reaches the controller and is refused there
    try:
        document = load_document(source, settings)
    except LoadError as e:
        echo_error(e.message if e.source == source else str(e))
        return None

    controller = controller or DocumentRootController()
    if controller.load(document, source=source).unwrap_or(None) is None:
        echo_error(controller.status)
        return None
    return controller
