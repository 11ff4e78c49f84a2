"""Language-dependent helpers: stopwords, stemming and language codes."""

from .languages import SUPPORTED_LANGUAGES, resolve_language  # noqa: F401
from .stopwords import get_stopwords, resolve_stopwords  # noqa: F401
from .stemming import stem, should_stem  # noqa: F401
