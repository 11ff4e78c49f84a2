"""Recall check of a search against gold-standard titles."""

from typing import Iterable, List, Optional

from pydantic import BaseModel, Field
from rapidfuzz import fuzz, process

from ..config.settings import settings
from ..core.errors import ConfigurationError
from ..core.normalization import normalize_title
from ..utils.logging import get_logger

logger = get_logger(__name__)


class TitleMatch(BaseModel):
    """A gold-standard title and the retrieved title that matched it."""
    gold_title: str
    retrieved_title: str
    similarity: float = Field(..., ge=0.0, le=1.0)


class RecallResult(BaseModel):
    """Partition of gold-standard titles into matched and unmatched."""
    matched: List[TitleMatch] = Field(default_factory=list)
    unmatched: List[str] = Field(default_factory=list)

    @property
    def recall(self) -> float:
        total = len(self.matched) + len(self.unmatched)
        return len(self.matched) / total if total else 0.0


def check_recall(
    gold_titles: Iterable[str],
    retrieved_titles: Iterable[str],
    threshold: Optional[float] = None,
) -> RecallResult:
    """Fuzzy-match each gold-standard title against the retrieved titles.

    Titles are compared after normalization (lower case, no punctuation,
    collapsed whitespace) with ``rapidfuzz`` ratio similarity.
    """
    if threshold is None:
        threshold = settings.recall_threshold
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(f"threshold must be within [0, 1], got {threshold}")

    retrieved = [t for t in retrieved_titles if t and t.strip()]
    normalized = [normalize_title(t) for t in retrieved]
    result = RecallResult()
    for gold in gold_titles:
        if not gold or not gold.strip():
            continue
        best = process.extractOne(normalize_title(gold), normalized, scorer=fuzz.ratio) if normalized else None
        if best is not None and best[1] / 100.0 >= threshold:
            result.matched.append(
                TitleMatch(gold_title=gold, retrieved_title=retrieved[best[2]], similarity=best[1] / 100.0)
            )
        else:
            result.unmatched.append(gold)
    logger.info(
        f"Recall check: {len(result.matched)} matched, {len(result.unmatched)} unmatched "
        f"(threshold={threshold})",
        extra={"fields": {"stage": "recall", "matched": len(result.matched), "unmatched": len(result.unmatched)}},
    )
    return result
