"""proxymap - Generate nginx reverse-proxy location blocks from source/proxy domain pairs"""

from .exceptions import (
    ProxymapError,
    MappingValidationError,
    MissingInputError,
    MalformedSourceError,
    MalformedProxyError,
    DuplicateSourceError,
    MappingRangeError,
    NothingSelectedError,
    ClipboardUnavailableError,
)
from .mapping import (
    DomainMapping,
    MappingStore,
    MappingWorkspace,
    PreviewPolicy,
    is_valid_domain,
    validate_mapping,
)
from .renderer import escape_for_regex, render_all, render_one
from .infrastructure import ClipboardManager

__version__ = "0.1.0"
__all__ = [
    "DomainMapping",
    "MappingStore",
    "MappingWorkspace",
    "PreviewPolicy",
    "is_valid_domain",
    "validate_mapping",
    "escape_for_regex",
    "render_one",
    "render_all",
    "ClipboardManager",
    "ProxymapError",
    "MappingValidationError",
    "MissingInputError",
    "MalformedSourceError",
    "MalformedProxyError",
    "DuplicateSourceError",
    "MappingRangeError",
    "NothingSelectedError",
    "ClipboardUnavailableError",
]
