"""Domain mapping model, store and editing state."""

from .validator import DomainMapping, is_valid_domain, validate_mapping
from .store import MappingStore
from .workspace import MappingWorkspace, PreviewPolicy

__all__ = [
    "DomainMapping",
    "MappingStore",
    "MappingWorkspace",
    "PreviewPolicy",
    "is_valid_domain",
    "validate_mapping",
]
