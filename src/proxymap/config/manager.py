"""Configuration file management and utilities."""

import json
from pathlib import Path
from typing import Dict, Any, List, Tuple

from rich.console import Console
from rich.markup import escape

from .templates import DEFAULT_CONFIG_PATH, DEFAULT_CONFIG_TEMPLATE, EXAMPLE_PROXY, EXAMPLE_SOURCE

# Warnings go to stderr so they never mix with rendered configuration on stdout.
console = Console(stderr=True)


class ConfigManager:
    """Handles configuration file operations and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
        """Load configuration from JSON file, returning {} when it is absent or unreadable."""
        config_file = Path(config_path)
        if not config_file.exists():
            return {}
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            console.print(f"[red]Error parsing config file {config_path}: {e}[/red]")
            return {}
        except OSError as e:
            console.print(f"[red]Error reading config file {config_path}: {e}[/red]")
            return {}

        if not isinstance(config, dict):
            console.print(f"[red]Config file {config_path} must contain a JSON object[/red]")
            return {}
        return config

    @staticmethod
    def merge_config_with_args(config: Dict[str, Any], **cli_args) -> Dict[str, Any]:
        """Merge configuration with CLI arguments, giving priority to CLI args."""
        merged = {}

        def add_if_not_none(key: str, value: Any) -> None:
            if value is not None:
                merged[key] = value

        # Mappings: config entries first, then the ones given on the command line
        merged["mappings"] = ConfigManager.mappings_from_config(config) + list(
            cli_args.get("mappings") or []
        )

        # Preview configuration
        preview_config = ConfigManager.section(config, "preview")
        add_if_not_none(
            "empty_selection",
            cli_args.get("empty_selection") or preview_config.get("empty_selection"),
        )

        # Output configuration
        output_config = ConfigManager.section(config, "output")
        add_if_not_none("output_file", cli_args.get("output_file") or output_config.get("file"))
        add_if_not_none("print_mode", cli_args.get("print_mode") or output_config.get("print_mode"))
        merged["copy"] = bool(cli_args.get("copy")) or ConfigManager.flag(output_config, "output.copy", "copy")

        # CLI-only arguments
        add_if_not_none("select", cli_args.get("select"))

        return merged

    @staticmethod
    def section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
        """Return a nested config object, or {} when it is missing or not an object."""
        value = config.get(key)
        if value is None:
            return {}
        if not isinstance(value, dict):
            console.print(f"[yellow]Ignoring \"{key}\" in config: expected an object, got {escape(repr(value))}[/yellow]")
            return {}
        return value

    @staticmethod
    def flag(section: Dict[str, Any], name: str, key: str) -> bool:
        """Read a JSON boolean; anything else is reported and treated as false."""
        value = section.get(key)
        if value is None:
            return False
        if not isinstance(value, bool):
            console.print(f"[yellow]Ignoring \"{name}\" in config: expected true or false, got {escape(repr(value))}[/yellow]")
            return False
        return value

    @staticmethod
    def mappings_from_config(config: Dict[str, Any]) -> List[Tuple[str, str]]:
        """Extract (source, proxy) pairs from the config's "mappings" list."""
        pairs = []
        entries = config.get("mappings") or []
        if not isinstance(entries, list):
            console.print(f"[yellow]Ignoring \"mappings\" in config: expected a list, got {type(entries).__name__}[/yellow]")
            return pairs

        for entry in entries:
            if isinstance(entry, dict):
                pairs.append((str(entry.get("source") or ""), str(entry.get("proxy") or "")))
            else:
                console.print(f"[yellow]Ignoring malformed mapping entry in config: {escape(repr(entry))}[/yellow]")
        return pairs

    @staticmethod
    def create_config_file(config_path: str = DEFAULT_CONFIG_PATH,
                           source: str = EXAMPLE_SOURCE, proxy: str = EXAMPLE_PROXY) -> Path:
        """Write a starter config file containing one example mapping."""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG_TEMPLATE.format(source=source, proxy=proxy))
        return config_file
