"""Loading naive-search exports into ``Document`` records.

Only flat tabular exports are read here (CSV, TSV, JSON and JSON lines); the
records are expected to be deduplicated already.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from ..core.errors import ConfigurationError
from ..core.models import Document
from ..utils.logging import get_logger

logger = get_logger(__name__)

COLUMN_ALIASES: Dict[str, Sequence[str]] = {
    "title": ("title", "ti", "article_title", "document_title"),
    "abstract": ("abstract", "ab", "summary"),
    "keywords": ("keywords", "kw", "de", "author_keywords", "author keywords", "keyword"),
}


def _read_table(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path, dtype=str, keep_default_na=False)
    if suffix in (".tsv", ".txt"):
        return pd.read_csv(path, sep="\t", dtype=str, keep_default_na=False)
    if suffix == ".json":
        return pd.read_json(path, dtype=False)
    if suffix in (".jsonl", ".ndjson"):
        return pd.read_json(path, lines=True, dtype=False)
    raise ConfigurationError(f"Unsupported corpus format: {path.suffix!r}")


def _find_column(df: pd.DataFrame, field: str) -> Optional[str]:
    lowered = {str(col).strip().lower(): col for col in df.columns}
    for alias in COLUMN_ALIASES[field]:
        if alias in lowered:
            return lowered[alias]
    return None


def _cell(row: pd.Series, column: Optional[str]) -> Optional[str]:
    if column is None:
        return None
    value = row[column]
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return None
    if isinstance(value, list):
        value = "; ".join(str(v) for v in value)
    text = str(value).strip()
    return text or None


def load_corpus(path: Path) -> List[Document]:
    """Read a corpus file into documents, preserving row order."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Corpus file not found: {path}")
    df = _read_table(path)
    columns = {field: _find_column(df, field) for field in COLUMN_ALIASES}
    if columns["title"] is None:
        raise ConfigurationError(f"No title column in {path}; columns are {list(df.columns)}")

    documents = [
        Document(
            title=_cell(row, columns["title"]) or "",
            abstract=_cell(row, columns["abstract"]),
            keywords=_cell(row, columns["keywords"]),
        )
        for _, row in df.iterrows()
    ]
    logger.info(f"Loaded {len(documents)} documents from {path}")
    return documents


def corpus_texts(documents: Sequence[Document], fields: Sequence[str] = ("title", "abstract")) -> List[str]:
    """One text per document, joining the selected fields."""
    return [doc.text(fields) for doc in documents]


def keyword_fields(documents: Sequence[Document]) -> List[str]:
    """The keyword field of each document that has one."""
    return [doc.keywords for doc in documents if doc.keywords]


def read_lines(path: Path) -> List[str]:
    """Non-empty stripped lines of a text file."""
    return [line.strip() for line in Path(path).read_text(encoding="utf-8").splitlines() if line.strip()]


def write_lines(lines: Sequence[str], path: Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
    logger.info(f"Saved {len(lines)} lines to {path}")
