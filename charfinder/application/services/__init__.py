"""Application services: normalization, matching and query validation."""

from charfinder.application.services.matcher import (
    NameIndex,
    filter_entries,
    query_term_set,
)
from charfinder.application.services.normalizer import normalize
from charfinder.application.services.query_validator import (
    DEFAULT_QUERY_PARAM,
    classify_query,
    is_blank,
    validate_query,
)

__all__ = [
    "DEFAULT_QUERY_PARAM",
    "NameIndex",
    "classify_query",
    "filter_entries",
    "is_blank",
    "normalize",
    "query_term_set",
    "validate_query",
]
