"""Document-by-term presence matrix."""

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Tuple, Union

import numpy as np
import pandas as pd

from ..core.models import Document
from ..core.normalization import normalize_term, split_fragments, tokenize
from ..utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_FIELDS = ("title", "abstract", "keywords")


def _document_text(document: Union[Document, str], fields: Sequence[str]) -> str:
    if isinstance(document, Document):
        return document.text(fields)
    return document or ""


def build_feature_matrix(
    documents: Iterable[Union[Document, str]],
    terms: Iterable[str],
    binary: bool = True,
    fields: Sequence[str] = DEFAULT_FIELDS,
) -> pd.DataFrame:
    """Build a documents x terms matrix of term presence (or counts).

    A term matches a document when its tokens appear as a contiguous run of
    the document's tokens inside one clause, case-insensitively. Partial
    words never match: ``fire`` matches "fire ecology" but not "wildfire" or
    "fires", and "fire ecology" does not match "severe fire. Ecology of ...".
    Record fields are joined with a period, so a match never spans two fields.

    Args:
        documents: Corpus records or raw text, in corpus order.
        terms: Candidate terms; normalized and deduplicated here.
        binary: Store 0/1 presence instead of occurrence counts.
        fields: Record fields used when ``documents`` are ``Document`` models.

    Returns:
        DataFrame indexed by document position with one column per term,
        columns sorted alphabetically.
    """
    texts = [_document_text(d, fields) for d in documents]
    columns = sorted({normalize_term(t) for t in terms} - {""})

    # Index terms by their token tuple so each document is scanned once per
    # distinct term length.
    by_tokens: Dict[Tuple[str, ...], List[int]] = defaultdict(list)
    for col, term in enumerate(columns):
        tokens = tuple(tokenize(term))
        if tokens:
            by_tokens[tokens].append(col)
    lengths = sorted({len(tokens) for tokens in by_tokens})

    data = np.zeros((len(texts), len(columns)), dtype=np.int64)
    for row, text in enumerate(texts):
        for tokens in split_fragments(text):
            for n in lengths:
                for i in range(len(tokens) - n + 1):
                    for col in by_tokens.get(tuple(tokens[i:i + n]), ()):
                        data[row, col] += 1
    if binary:
        data = (data > 0).astype(np.int64)

    matrix = pd.DataFrame(
        data,
        index=pd.RangeIndex(len(texts), name="document"),
        columns=pd.Index(columns, name="term", dtype=object),
    )
    logger.info(
        f"Built feature matrix: {len(texts)} documents x {len(columns)} terms",
        extra={"fields": {"stage": "matrix", "documents": len(texts), "terms": len(columns)}},
    )
    return matrix
