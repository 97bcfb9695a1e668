#!/usr/bin/env python3
"""proxymap CLI - Generate nginx reverse-proxy location blocks from domain mappings."""

from pathlib import Path
from typing import Optional, Dict, Any, List, Tuple
import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config.manager import ConfigManager
from .config.templates import DEFAULT_CONFIG_PATH, EXAMPLE_PROXY, EXAMPLE_SOURCE
from .exceptions import (
    ClipboardUnavailableError,
    MappingValidationError,
    NothingSelectedError,
)
from .infrastructure.clipboard import ClipboardManager
from .infrastructure.output import OutputWriter
from .mapping.validator import is_valid_domain
from .mapping.workspace import MappingWorkspace, PreviewPolicy
from .shell import MappingShell, config_panel

console = Console()
# Status messages go to stderr so plain output can be piped into a file.
err_console = Console(stderr=True)

CONFIG_ENVVAR = "PROXYMAP_CONFIG"


def load_config(config_path: str) -> Dict[str, Any]:
    """Load configuration from JSON file."""
    return ConfigManager.load_config(config_path)


def merge_config_with_args(config: Dict[str, Any], **cli_args) -> Dict[str, Any]:
    """Merge configuration with CLI arguments, giving priority to CLI args."""
    return ConfigManager.merge_config_with_args(config, **cli_args)


def parse_mapping_option(ctx, param, values) -> List[Tuple[str, str]]:
    """Split repeated SOURCE=PROXY options into pairs."""
    pairs = []
    for value in values:
        source, sep, proxy = value.partition("=")
        if not sep:
            raise click.BadParameter(f"expected SOURCE=PROXY, got {value!r}")
        pairs.append((source.strip(), proxy.strip()))
    return pairs


def build_workspace(merged_config: Dict[str, Any]) -> MappingWorkspace:
    """Create a workspace holding every configured mapping, in order."""
    policy = merged_config.get("empty_selection", PreviewPolicy.ALL.value)
    try:
        workspace = MappingWorkspace(policy=PreviewPolicy(policy), clipboard=ClipboardManager())
    except ValueError:
        raise click.ClickException(f"Unknown empty_selection policy: {policy!r} (use 'all' or 'placeholder')")

    for number, (source, proxy) in enumerate(merged_config.get("mappings", []), start=1):
        try:
            workspace.add(source, proxy)
        except MappingValidationError as e:
            raise click.ClickException(f"Mapping #{number} ({source} → {proxy}) rejected: {str(e)}")
    return workspace


@click.group()
def cli():
    """proxymap - Generate nginx location blocks that reverse-proxy one domain through another."""
    # Let PROXYMAP_CONFIG come from a .env file in the working directory.
    load_dotenv(Path.cwd() / ".env")


@cli.command()
@click.option(
    "--path",
    "-p",
    "config_path",
    default=DEFAULT_CONFIG_PATH,
    envvar=CONFIG_ENVVAR,
    show_default=True,
    help="Where to write the configuration file",
)
@click.option("--source", default=EXAMPLE_SOURCE, show_default=True, help="Source domain of the example mapping")
@click.option("--proxy", default=EXAMPLE_PROXY, show_default=True, help="Proxy domain of the example mapping")
@click.option("--force", is_flag=True, help="Overwrite an existing configuration file")
def init(config_path: str, source: str, proxy: str, force: bool):
    """Create a starter configuration file with one example mapping."""
    if not is_valid_domain(source) or not is_valid_domain(proxy):
        raise click.ClickException("Example mapping must use valid domain names")

    if Path(config_path).exists() and not force:
        console.print(f"[yellow]Configuration already exists: {config_path}[/yellow]")
        if not click.confirm("Do you want to overwrite it?"):
            console.print("[yellow]Initialization cancelled[/yellow]")
            return

    config_file = ConfigManager.create_config_file(config_path, source=source, proxy=proxy)
    console.print(f"[green]✓ Created config file: {config_file}[/green]")
    console.print("\n[bold]Next steps:[/bold]")
    console.print(f"• Edit {config_file} to list your domain mappings")
    console.print("• Run '[bold cyan]proxymap render[/bold cyan]' to print the nginx configuration")
    console.print("• Run '[bold cyan]proxymap shell[/bold cyan]' to edit mappings interactively")


@cli.command()
@click.option(
    "--config",
    "-c",
    default=DEFAULT_CONFIG_PATH,
    envvar=CONFIG_ENVVAR,
    show_default=True,
    help="Path to configuration JSON file",
)
@click.option(
    "--map",
    "-m",
    "mappings",
    multiple=True,
    callback=parse_mapping_option,
    metavar="SOURCE=PROXY",
    help="Domain mapping to render (repeatable, added after config mappings)",
)
@click.option("--select", "-s", type=click.IntRange(min=1), help="Render only mapping #N")
@click.option(
    "--empty-selection",
    type=click.Choice([policy.value for policy in PreviewPolicy]),
    help="What to render when no mapping is selected",
)
@click.option("--output", "-o", "output_file", type=click.Path(dir_okay=False), help="Write the configuration to a file")
@click.option("--copy", is_flag=True, help="Copy the configuration to the clipboard")
@click.option("--print_mode", type=click.Choice(["plain", "rich"]), help="Output format")
def render(**cli_args):
    """Render nginx location blocks for the configured domain mappings."""
    config_path = cli_args.pop("config")
    config = load_config(config_path)
    merged_config = merge_config_with_args(config, **cli_args)

    workspace = build_workspace(merged_config)
    if not len(workspace.store):
        raise click.ClickException(
            f"No domain mappings to render. Add some with --map SOURCE=PROXY or in {config_path}"
        )

    select = merged_config.get("select")
    if select is not None:
        if select > len(workspace.store):
            raise click.ClickException(f"No mapping #{select} (there are {len(workspace.store)})")
        workspace.select(select - 1)

    try:
        text = workspace.preview()
    except NothingSelectedError as e:
        raise click.ClickException(str(e))

    output_file = merged_config.get("output_file")
    if output_file:
        OutputWriter().write(output_file, text)
    elif merged_config.get("print_mode", "plain") == "rich":
        title = "All mappings" if select is None else f"Mapping #{select}"
        console.print(config_panel(text, title))
    else:
        click.echo(text)

    if merged_config.get("copy"):
        try:
            workspace.clipboard.copy(text)
        except ClipboardUnavailableError as e:
            raise click.ClickException(str(e))
        what = "all configuration" if select is None else f"configuration for mapping #{select}"
        err_console.print(f"[green]✓ Copied {what}[/green]")


@cli.command()
@click.argument("domains", nargs=-1, required=True)
@click.pass_context
def check(ctx, domains: Tuple[str, ...]):
    """Check whether domain names are syntactically valid."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Domain")
    table.add_column("Valid", justify="center")

    invalid = 0
    for domain in domains:
        valid = is_valid_domain(domain.strip())
        invalid += not valid
        table.add_row(escape(domain), "[green]✓[/green]" if valid else "[red]✗[/red]")
    console.print(table)

    if invalid:
        console.print(f"[red]{invalid} of {len(domains)} domain names are malformed[/red]")
        ctx.exit(1)


@cli.command()
@click.option(
    "--config",
    "-c",
    default=DEFAULT_CONFIG_PATH,
    envvar=CONFIG_ENVVAR,
    show_default=True,
    help="Path to configuration JSON file",
)
@click.option(
    "--empty-selection",
    type=click.Choice([policy.value for policy in PreviewPolicy]),
    help="What 'show' displays when no mapping is selected",
)
def shell(config: str, empty_selection: Optional[str]):
    """Edit domain mappings interactively and preview their configuration."""
    merged_config = merge_config_with_args(load_config(config), empty_selection=empty_selection)
    workspace = build_workspace(merged_config)
    session = MappingShell(workspace, console=console)

    console.print("[bold green]proxymap interactive mode[/bold green] (type [bold cyan]help[/bold cyan] for commands, [bold cyan]q[/bold cyan] to quit)")
    if len(workspace.store):
        console.print(f"[cyan]Loaded {len(workspace.store)} mappings from {config}[/cyan]")
    session.do_list([])

    while True:
        try:
            user_input = console.input("[bold blue]proxymap > [/bold blue]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            break
        if not session.handle(user_input):
            break

    console.print("[cyan]Bye[/cyan]")


if __name__ == "__main__":
    cli()
