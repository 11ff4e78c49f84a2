"""Error taxonomy shared by every pipeline stage."""


class LitSearchError(Exception):
    """Base class for all errors raised by litsearch."""


class ConfigurationError(LitSearchError, ValueError):
    """An option has an unknown value or a numeric parameter is out of range."""


class EmptyGraphError(LitSearchError):
    """The operation needs a graph with at least one node."""


class UnsupportedLanguageError(ConfigurationError):
    """Stemming or query rendering was requested for an unsupported language."""
