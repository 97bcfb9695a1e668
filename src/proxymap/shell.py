"""Interactive mapping editor used by ``proxymap shell``."""

import shlex
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .exceptions import (
    MappingRangeError,
    MappingValidationError,
    NothingSelectedError,
    ProxymapError,
)
from .mapping.workspace import MappingWorkspace

QUIT_COMMANDS = ("q", "quit", "exit")

COMMAND_HELP = (
    ("add SOURCE PROXY", "Add a domain mapping"),
    ("edit N SOURCE PROXY", "Replace mapping #N"),
    ("rm N", "Remove mapping #N"),
    ("up N / down N", "Move mapping #N up or down"),
    ("select N", "Preview only mapping #N"),
    ("unselect", "Go back to the default preview"),
    ("list", "Show all mappings"),
    ("show", "Show the generated configuration"),
    ("copy [N|all]", "Copy the preview, mapping #N or everything"),
    ("clear", "Clear the screen"),
    ("q", "Quit"),
)


def config_panel(text: str, title: str) -> Panel:
    """Frame a rendered configuration for the terminal."""
    return Panel(
        Syntax(text, "nginx", theme="monokai", line_numbers=False, word_wrap=True),
        title=f"[bold green]{title}[/bold green]",
        border_style="green",
        padding=(1, 2),
    )


class _UsageError(Exception):
    """A shell command was called with the wrong arguments."""


class MappingShell:
    """Line-oriented front end over a MappingWorkspace. Positions are 1-based."""

    def __init__(self, workspace: MappingWorkspace, console: Optional[Console] = None):
        self.workspace = workspace
        self.console = console or Console()

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the user asked to quit."""
        try:
            args = shlex.split(line)
        except ValueError as e:
            self.console.print(f"[red]Could not parse command: {escape(str(e))}[/red]")
            return True

        if not args:
            return True

        command, args = args[0].lower(), args[1:]
        if command in QUIT_COMMANDS:
            return False

        handler = getattr(self, f"do_{command}", None)
        if handler is None:
            self.console.print(f"[red]Unknown command: {escape(command)}[/red] (type [bold cyan]help[/bold cyan])")
            return True

        try:
            handler(args)
        except MappingValidationError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
        except MappingRangeError as e:
            self.console.print(f"[red]No mapping #{self._display(e.position)}[/red]")
        except NothingSelectedError as e:
            self.console.print(f"[yellow]{escape(str(e))}[/yellow]")
        except ProxymapError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
        except _UsageError as e:
            self.console.print(f"[red]{escape(str(e))}[/red]")
        return True

    def do_add(self, args: List[str]) -> None:
        self._expect(args, 2, "add SOURCE PROXY")
        mapping = self.workspace.add(args[0], args[1])
        self.console.print(f"[green]✓ Mapping added: {mapping}[/green]")

    def do_edit(self, args: List[str]) -> None:
        self._expect(args, 3, "edit N SOURCE PROXY")
        mapping = self.workspace.replace(self._position(args[0]), args[1], args[2])
        self.console.print(f"[green]✓ Mapping #{args[0]} updated: {mapping}[/green]")

    def do_rm(self, args: List[str]) -> None:
        self._expect(args, 1, "rm N")
        mapping = self.workspace.remove(self._position(args[0]))
        self.console.print(f"[green]✓ Mapping removed: {mapping}[/green]")

    def do_up(self, args: List[str]) -> None:
        self._expect(args, 1, "up N")
        if not self.workspace.move_up(self._position(args[0])):
            self.console.print(f"[yellow]Mapping #{args[0]} is already first[/yellow]")
            return
        self.do_list([])

    def do_down(self, args: List[str]) -> None:
        self._expect(args, 1, "down N")
        if not self.workspace.move_down(self._position(args[0])):
            self.console.print(f"[yellow]Mapping #{args[0]} is already last[/yellow]")
            return
        self.do_list([])

    def do_select(self, args: List[str]) -> None:
        self._expect(args, 1, "select N")
        mapping = self.workspace.select(self._position(args[0]))
        self.console.print(f"[cyan]Selected mapping #{args[0]}: {mapping}[/cyan]")

    def do_unselect(self, args: List[str]) -> None:
        self.workspace.clear_selection()
        self.console.print("[cyan]Selection cleared[/cyan]")

    def do_list(self, args: List[str]) -> None:
        mappings = self.workspace.store.list_mappings()
        if not mappings:
            self.console.print(
                "[yellow]No domain mappings yet. Add one with [bold cyan]add SOURCE PROXY[/bold cyan].[/yellow]"
            )
            return

        table = Table(title=f"{len(mappings)} domain mappings", show_header=True, header_style="bold magenta")
        table.add_column("", width=1)
        table.add_column("#", justify="right")
        table.add_column("Source")
        table.add_column("Proxy")
        for index, mapping in enumerate(mappings):
            marker = "▶" if index == self.workspace.selected else ""
            table.add_row(marker, str(index + 1), mapping.source, mapping.proxy)
        self.console.print(table)

    def do_show(self, args: List[str]) -> None:
        if not len(self.workspace.store):
            self.do_list([])
            return
        selected = self.workspace.selected
        title = "All mappings" if selected is None else f"Mapping #{selected + 1}"
        self.console.print(config_panel(self.workspace.preview(), title))

    def do_copy(self, args: List[str]) -> None:
        if not args:
            self.workspace.copy_preview()
            self.console.print("[green]✓ Copied configuration[/green]")
        elif args[0].lower() == "all":
            self.workspace.copy_all()
            self.console.print("[green]✓ Copied all configuration[/green]")
        else:
            self.workspace.copy_mapping(self._position(args[0]))
            self.console.print(f"[green]✓ Copied configuration for mapping #{args[0]}[/green]")

    def do_clear(self, args: List[str]) -> None:
        self.console.clear()

    def do_help(self, args: List[str]) -> None:
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Command", style="cyan")
        table.add_column("Description")
        for usage, description in COMMAND_HELP:
            table.add_row(usage, description)
        self.console.print(table)

    @staticmethod
    def _expect(args: List[str], count: int, usage: str) -> None:
        if len(args) != count:
            raise _UsageError(f"Usage: {usage}")

    @staticmethod
    def _position(value: str) -> int:
        try:
            return int(value) - 1
        except ValueError:
            raise _UsageError(f"Mapping number must be an integer, got {value!r}")

    @staticmethod
    def _display(position) -> str:
        return str(position + 1) if isinstance(position, int) else str(position)
