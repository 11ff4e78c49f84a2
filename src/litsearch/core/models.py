"""Core domain models and per-stage option bundles."""

from enum import Enum
from typing import List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..config.settings import settings
from .errors import ConfigurationError


class Document(BaseModel):
    """A single record of the naive-search corpus.

    Its identity is its position in the corpus; the record itself is never
    modified after import.
    """

    model_config = ConfigDict(frozen=True)

    title: str = ""
    abstract: Optional[str] = None
    keywords: Optional[str] = None

    def text(self, fields: Sequence[str] = ("title", "abstract")) -> str:
        """Join the requested text fields, skipping empty ones."""
        parts: List[str] = []
        for name in fields:
            if name not in ("title", "abstract", "keywords"):
                raise ConfigurationError(f"Unknown document field: {name!r}")
            value = getattr(self, name)
            if value:
                parts.append(value.strip())
        return ". ".join(part for part in parts if part)


class ScoredTerm(BaseModel):
    """A candidate term with its extraction score and corpus frequency."""

    model_config = ConfigDict(frozen=True)

    term: str
    score: float
    frequency: int = Field(..., ge=0)


class ExtractionMethod(str, Enum):
    RAKE = "rake"
    FAKERAKE = "fakerake"
    TAGGED = "tagged"
    NGRAM = "ngram"


class CutoffMethod(str, Enum):
    CUMULATIVE = "cumulative"
    CHANGEPOINT = "changepoint"
    KNEE = "knee"
    SPLINE = "spline"


class ImportanceMethod(str, Enum):
    STRENGTH = "strength"
    DEGREE = "degree"


class Closure(str, Enum):
    NONE = "none"
    LEFT = "left"
    RIGHT = "right"
    FULL = "full"


class ExtractionConfig(BaseModel):
    method: ExtractionMethod = ExtractionMethod.FAKERAKE
    min_freq: int = Field(default_factory=lambda: settings.min_freq, ge=1)
    ngrams: bool = True
    min_n: int = Field(default_factory=lambda: settings.min_n, ge=1)
    max_n: int = Field(default_factory=lambda: settings.max_n, ge=1)
    language: str = Field(default_factory=lambda: settings.default_language)
    keyword_separator: str = Field(default_factory=lambda: settings.keyword_separator, min_length=1)
    # Neighbourhood size used by fakerake when counting co-occurrences
    window: int = Field(2, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "ExtractionConfig":
        if self.max_n < self.min_n:
            raise ValueError(f"max_n ({self.max_n}) must be >= min_n ({self.min_n})")
        return self


class NetworkConfig(BaseModel):
    min_studies: int = Field(default_factory=lambda: settings.min_studies, ge=1)
    min_occ: int = Field(default_factory=lambda: settings.min_occ, ge=1)
    normalize: bool = False
    drop_isolated: bool = False


class CutoffConfig(BaseModel):
    method: CutoffMethod = CutoffMethod.CUMULATIVE
    imp_method: ImportanceMethod = ImportanceMethod.STRENGTH
    percent: float = Field(default_factory=lambda: settings.cutoff_percent, gt=0, le=1)
    knot_num: int = Field(default_factory=lambda: settings.knot_num, ge=1)


class QueryConfig(BaseModel):
    languages: List[str] = Field(default_factory=lambda: [settings.default_language], min_length=1)
    stemming: bool = False
    closure: Closure = Closure.NONE
    exactphrase: bool = False


ConfigT = TypeVar("ConfigT", bound=BaseModel)


def build_config(model: Type[ConfigT], **options) -> ConfigT:
    """Instantiate an option bundle, reporting bad values as ConfigurationError."""
    # Unset options fall back to the model defaults
    options = {key: value for key, value in options.items() if value is not None}
    try:
        return model(**options)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or model.__name__}: {err['msg']}"
            for err in exc.errors()
        )
        raise ConfigurationError(f"Invalid {model.__name__}: {problems}") from exc


EnumT = TypeVar("EnumT", bound=Enum)


def parse_option(enum: Type[EnumT], value, name: str) -> EnumT:
    """Coerce a string or enum member into ``enum``."""
    try:
        return enum(value)
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum)
        raise ConfigurationError(f"Invalid {name} {value!r}; expected one of: {allowed}") from exc
