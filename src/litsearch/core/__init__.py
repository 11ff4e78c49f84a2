"""Domain models, errors and text normalization."""

from .errors import (  # noqa: F401
    LitSearchError,
    ConfigurationError,
    EmptyGraphError,
    UnsupportedLanguageError,
)
from .models import (  # noqa: F401
    Document,
    ScoredTerm,
    ExtractionMethod,
    CutoffMethod,
    ImportanceMethod,
    Closure,
)
