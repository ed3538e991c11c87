"""
Explore Command - Interactive outline session.

Each command typed at the prompt is one user interaction: it is handled to
completion (one bounded expand, collapse or panel toggle) before the next
prompt appears, and the tree is redrawn afterwards.
"""

import json
import shlex
from typing import Callable, Dict, List

import click
from rich.console import Console
from rich.json import JSON
from rich.prompt import Prompt

from ...core.controller import DocumentRootController
from ...core.materializer import UnknownPathError
from ...render.console import render_tree
from ..utils import open_document

console = Console()

HELP_TEXT = """\
[bold]Commands[/bold]
  open PATH      expand a node (e.g. open root/0)
  close PATH     collapse a node and drop its subtree
  toggle PATH    expand/collapse; on a leaf, show/hide its fields
  fields PATH    show/hide the structure panel of a node
  print PATH     dump the raw node as JSON
  load SOURCE    replace the document (file or URL)
  tree           redraw the outline
  help           this text
  quit           leave"""


class ExploreSession:
    """Dispatches prompt lines against one controller."""

    def __init__(self, controller: DocumentRootController):
        self.controller = controller
        self.handlers: Dict[str, Callable[[List[str]], bool]] = {
            "open": self._open,
            "close": self._close,
            "toggle": self._toggle,
            "fields": self._fields,
            "print": self._print,
            "load": self._load,
            "tree": lambda args: True,
            "help": self._help,
        }

    def handle(self, line: str) -> bool:
        """
        Run one prompt line.

        Returns:
            bool: True if the tree should be redrawn.
        """
        try:
            words = shlex.split(line)
        except ValueError as e:
            console.print(f"[red]Cannot parse command:[/red] {e}")
            return False
        if not words:
            return False

        command, args = words[0].lower(), words[1:]
        handler = self.handlers.get(command)
        if handler is None:
            console.print(f"[yellow]Unknown command '{command}'. Type 'help'.[/yellow]")
            return False
        try:
            return handler(args)
        except UnknownPathError as e:
            console.print(f"[red]{e.args[0]}[/red]")
            return False

    def _path(self, args: List[str]) -> str:
        return args[0] if args else "root"

    def _open(self, args: List[str]) -> bool:
        self.controller.materializer.expand(self._path(args))
        return True

    def _close(self, args: List[str]) -> bool:
        self.controller.materializer.collapse(self._path(args))
        return True

    def _toggle(self, args: List[str]) -> bool:
        self.controller.materializer.toggle(self._path(args))
        return True

    def _fields(self, args: List[str]) -> bool:
        self.controller.materializer.toggle_structure(self._path(args))
        return True

    def _print(self, args: List[str]) -> bool:
        pnode = self.controller.materializer.get(self._path(args))
        console.print(f"[bold]=== Object for {pnode.label.id} ===[/bold]")
        console.print(JSON(json.dumps(pnode.node, default=str)))
        return False

    def _load(self, args: List[str]) -> bool:
        if not args:
            console.print("[yellow]Usage: load SOURCE[/yellow]")
            return False
        # A failed load leaves the current document in place.
        return open_document(args[0], controller=self.controller) is not None

    def _help(self, args: List[str]) -> bool:
        console.print(HELP_TEXT)
        return False

    def redraw(self) -> None:
        materializer = self.controller.materializer
        console.print(render_tree(materializer))
        console.print(f"[dim]{self.controller.status} · {len(materializer)} nodes materialized[/dim]")


@click.command()
@click.argument("source", required=False)
def explore(source: str):
    """
    Browse SOURCE interactively, expanding and collapsing on demand.
    """
    controller = open_document(source)
    if controller is None:
        return

    session = ExploreSession(controller)
    session.redraw()
    console.print("[dim]Type 'help' for commands.[/dim]")

    while True:
        try:
            line = Prompt.ask("[bold cyan]structview[/bold cyan]", default="", show_default=False)
        except (EOFError, KeyboardInterrupt):
            break
        if line.strip().lower() in ("quit", "exit", "q"):
            break
        if session.handle(line):
            session.redraw()
