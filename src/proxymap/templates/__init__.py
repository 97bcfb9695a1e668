"""Template files for generated configurations."""

from .location_templates import LOCATION_TEMPLATE, HIDDEN_RESPONSE_HEADERS

__all__ = ["LOCATION_TEMPLATE", "HIDDEN_RESPONSE_HEADERS"]
