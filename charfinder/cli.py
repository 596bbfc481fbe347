"""Console search: print matching characters for words given on the command line.

Usage:
    charfinder <word> [<word> ...]
    python -m charfinder <word> [<word> ...]

Uses the same settings (UNICODE_DATA_PATH, UNICODE_DATA_URL, ...) as the API.
Exit status: 0 with matches, 1 without, 2 on usage or data errors.
"""

import asyncio
import logging
import sys

from charfinder.application.use_cases.search import SearchService
from charfinder.core.config import get_settings
from charfinder.display import display
from charfinder.infrastructure.unicode_data import DatasetProviderFactory
from charfinder.shared.telemetry import setup_logging


async def run(words: list[str]) -> int:
    """Search for words and print results; return the exit status."""
    settings = get_settings()
    service = SearchService(DatasetProviderFactory.create_provider(settings))
    outcome = await service.search({"query": words})
    if not outcome.is_success:
        print(outcome.message, file=sys.stderr)
        return 2
    display(outcome.entries or ())
    if not outcome.entries:
        print(outcome.message, file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the charfinder console command."""
    words = sys.argv[1:] if argv is None else argv
    if not words:
        print("Usage: charfinder <word> [<word> ...]", file=sys.stderr)
        sys.exit(2)
    setup_logging(logging.WARNING)
    sys.exit(asyncio.run(run(words)))


if __name__ == "__main__":
    main()
