"""Character-name search use case.

Validates the raw query, obtains the dataset from the provider, runs the
matcher and shapes the outcome. Every domain error is recovered here into
an error outcome; nothing escapes as an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from charfinder.application.dtos.search import SearchOutcome
from charfinder.application.services.matcher import filter_entries
from charfinder.application.services.query_validator import (
    DEFAULT_QUERY_PARAM,
    validate_query,
)
from charfinder.domain.entities import CharacterEntry, Dataset
from charfinder.domain.exceptions import CharFinderException, DataUnavailableException

if TYPE_CHECKING:
    from charfinder.application.interfaces.services import IDatasetProvider

logger = logging.getLogger(__name__)


def match(dataset: Dataset, query_terms: Sequence[str]) -> list[CharacterEntry]:
    """Run the matcher, through the dataset's index when it has one."""
    if dataset.index is not None:
        return dataset.index.filter(query_terms)
    return filter_entries(dataset.entries, query_terms)


class SearchService:
    """Search character names by whole words (validator → dataset → matcher)."""

    def __init__(
        self,
        dataset_provider: "IDatasetProvider",
        param_name: str = DEFAULT_QUERY_PARAM,
    ) -> None:
        self.dataset_provider = dataset_provider
        self.param_name = param_name

    async def search(self, params: Mapping[str, Sequence[str]]) -> SearchOutcome:
        """Search for params[param_name]; return a success or error outcome."""
        try:
            query_terms = validate_query(params, self.param_name)
        except CharFinderException as e:
            logger.info("Query rejected (%s): %s", e.error_code, e.message)
            return SearchOutcome.failure(e)

        try:
            dataset = await self.dataset_provider.get()
        except DataUnavailableException as e:
            logger.error("Dataset unavailable: %s", e.details or e.message)
            return SearchOutcome.failure(e)

        results = match(dataset, query_terms)
        logger.debug("Query %r matched %d of %d entries", query_terms, len(results), len(dataset))
        return SearchOutcome.success(results)
