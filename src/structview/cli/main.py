"""
structview CLI - Main entry point.

This module registers all CLI commands. Each command is implemented
in its own module under cli/commands/.
"""

import logging
from pathlib import Path
from typing import Optional

import click

from ..config import load_settings
from .commands import explore, outline, pages, resolve, show


@click.group()
@click.version_option(package_name="structview")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution and materialization details")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: .structview/config.yaml)",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Optional[Path]):
    """structview: explore huge component-tree documents as a lazy outline.

    \b
    Quick Start:
      structview show page.json --depth 2
      structview explore https://example.com/page.json
      structview resolve page.json namingQuery "#comp-123"
      structview outline page.json --max-depth 3
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = load_settings(config_path)


# Register commands
main.add_command(show.show)
main.add_command(explore.explore)
main.add_command(resolve.resolve)
main.add_command(outline.outline)
main.add_command(pages.pages)

if __name__ == "__main__":
    main()
