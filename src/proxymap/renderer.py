"""Render domain mappings into nginx location blocks."""

from typing import Iterable, List, Optional, Tuple

from .mapping.validator import DomainMapping
from .templates import LOCATION_TEMPLATE

BLOCK_SEPARATOR = "\n\n"


def escape_for_regex(domain: str) -> str:
    """Escape the dots of a domain for use inside an nginx regex.

    Not idempotent: escaping an already escaped name adds a second
    backslash before every dot.
    """
    return domain.replace(".", "\\.")


def build_directives(mapping: DomainMapping) -> List[Tuple[str, Optional[str]]]:
    """Fill the location template for one mapping, keeping annotations paired with directives."""
    values = {
        "source": mapping.source,
        "proxy": mapping.proxy,
        "escaped_source": escape_for_regex(mapping.source),
    }
    return [
        (annotation, directive.format(**values) if directive is not None else None)
        for annotation, directive in LOCATION_TEMPLATE
    ]


def render_one(mapping: DomainMapping) -> str:
    """Return the annotated location block for a single mapping."""
    lines = []
    for annotation, directive in build_directives(mapping):
        lines.append(f"# {annotation}")
        if directive:
            lines.append(directive)
    return "\n".join(lines)


def render_all(mappings: Iterable[DomainMapping]) -> str:
    """Return the blocks of every mapping in order, separated by a blank line."""
    return BLOCK_SEPARATOR.join(render_one(mapping) for mapping in mappings)
