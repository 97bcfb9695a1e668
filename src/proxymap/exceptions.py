"""Custom exceptions for proxymap."""


class ProxymapError(Exception):
    """Base exception for proxymap errors."""

    pass


class MappingValidationError(ProxymapError):
    """Raised when a submitted domain pair is rejected."""

    pass


class MissingInputError(MappingValidationError):
    """Raised when the source or proxy domain is empty."""

    pass


class MalformedSourceError(MappingValidationError):
    """Raised when the source domain is not a valid host name."""

    def __init__(self, message, domain=None):
        super().__init__(message)
        self.domain = domain


class MalformedProxyError(MappingValidationError):
    """Raised when the proxy domain is not a valid host name."""

    def __init__(self, message, domain=None):
        super().__init__(message)
        self.domain = domain


class DuplicateSourceError(MappingValidationError):
    """Raised when the source domain is already mapped."""

    def __init__(self, message, domain=None):
        super().__init__(message)
        self.domain = domain


class MappingRangeError(ProxymapError, IndexError):
    """Raised when a position does not refer to an existing mapping."""

    def __init__(self, message, position=None):
        super().__init__(message)
        self.position = position


class NothingSelectedError(ProxymapError):
    """Raised when a single-mapping preview is requested without a selection."""

    pass


class ClipboardUnavailableError(ProxymapError):
    """Raised when the system clipboard cannot be written."""

    pass
