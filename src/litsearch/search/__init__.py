"""Boolean query writing and recall checking."""

from .query_writer import write_search, write_title_search, remove_redundancies, render_term  # noqa: F401
from .recall import check_recall, RecallResult, TitleMatch  # noqa: F401
