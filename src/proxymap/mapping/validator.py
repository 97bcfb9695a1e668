"""Domain name and mapping validation."""

import re
from dataclasses import dataclass
from typing import Iterable

from ..exceptions import (
    DuplicateSourceError,
    MalformedProxyError,
    MalformedSourceError,
    MissingInputError,
)

# Dot-separated labels of 1-63 alphanumerics, hyphens allowed only inside a label.
DOMAIN_PATTERN = re.compile(
    r"[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(\.[a-zA-Z0-9]([a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)


@dataclass(frozen=True)
class DomainMapping:
    """One proxy rule: requests for ``proxy`` are served from ``source``."""
    source: str
    proxy: str

    def __str__(self) -> str:
        return f"{self.source} → {self.proxy}"


def is_valid_domain(name: str) -> bool:
    """Check whether ``name`` has the syntactic shape of a host name."""
    if not name:
        return False
    return DOMAIN_PATTERN.fullmatch(name) is not None


def validate_mapping(source: str, proxy: str, existing_sources: Iterable[str] = ()) -> DomainMapping:
    """Trim and validate a submitted pair, returning the mapping it describes.

    Checks run in a fixed order so the first problem reported is the one the
    user should fix first: missing input, malformed source, malformed proxy,
    then duplicate source. Proxy domains may repeat freely.
    """
    source = (source or "").strip()
    proxy = (proxy or "").strip()

    if not source or not proxy:
        raise MissingInputError("Please enter both a source domain and a proxy domain")

    if not is_valid_domain(source):
        raise MalformedSourceError(f"Source domain is malformed: {source}", domain=source)

    if not is_valid_domain(proxy):
        raise MalformedProxyError(f"Proxy domain is malformed: {proxy}", domain=proxy)

    if source in set(existing_sources):
        raise DuplicateSourceError(f"Source domain already exists: {source}", domain=source)

    return DomainMapping(source=source, proxy=proxy)
