"""Writing generated configuration to disk."""

from pathlib import Path
from typing import Union

from rich.console import Console


class OutputWriter:
    """Writes rendered location blocks to a file for pasting into nginx."""

    def __init__(self):
        self.console = Console()

    def write(self, path: Union[str, Path], text: str) -> Path:
        """Write text to path, creating parent directories as needed."""
        output_path = Path(path)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
            if text and not text.endswith("\n"):
                f.write("\n")

        self.console.print(f"[green]✓ Wrote configuration to {output_path}[/green]")
        return output_path
