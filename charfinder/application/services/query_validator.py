"""Query validation: classify raw query parameters before any matching runs.

States are checked in order and the first match wins:

    NO_PARAMETER        recognized key absent            -> InvalidQuery
    PRESENT_BUT_EMPTY   key present with no values       -> InvalidQuery
    PRESENT_WITH_BLANK  at least one blank value         -> EmptyQuery
    VALID               one or more non-blank values     -> accepted

A request carrying only unrecognized parameter names lands in NO_PARAMETER,
so a typo in the parameter name is reported differently from a blank value.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from charfinder.application.services.normalizer import normalize
from charfinder.domain.enums import QueryState
from charfinder.domain.exceptions import EmptyQueryException, InvalidQueryException

DEFAULT_QUERY_PARAM = "query"


def is_blank(value: str) -> bool:
    """True when value has no word tokens (empty, whitespace or hyphens only).

    Broader than the empty string on purpose: "-" or " " normalize to no
    terms, and an empty term set would match every name.
    """
    return not normalize(value)


def classify_query(
    params: Mapping[str, Sequence[str]], param_name: str = DEFAULT_QUERY_PARAM
) -> QueryState:
    """Return the validator state for params without raising."""
    if param_name not in params:
        return QueryState.NO_PARAMETER
    values = params[param_name]
    if not values:
        return QueryState.PRESENT_BUT_EMPTY
    if any(is_blank(v) for v in values):
        return QueryState.PRESENT_WITH_BLANK
    return QueryState.VALID


def validate_query(
    params: Mapping[str, Sequence[str]], param_name: str = DEFAULT_QUERY_PARAM
) -> list[str]:
    """Return the ordered query values, or raise the matching rejection.

    Raises:
        InvalidQueryException: Parameter missing or without values.
        EmptyQueryException: Parameter has a blank value.
    """
    state = classify_query(params, param_name)
    if state is QueryState.NO_PARAMETER:
        # Only unrecognized names were sent: point at the expected one.
        message = (
            f"Invalid query given: expected parameter '{param_name}'"
            if params
            else "Invalid query given"
        )
        raise InvalidQueryException(message, param=param_name)
    if state is QueryState.PRESENT_BUT_EMPTY:
        raise InvalidQueryException(param=param_name)
    if state is QueryState.PRESENT_WITH_BLANK:
        raise EmptyQueryException(param=param_name)
    return list(params[param_name])
