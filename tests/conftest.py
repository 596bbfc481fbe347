"""Pytest configuration and fixtures for charfinder.

HTTP tests build the app with create_app() and an in-memory dataset
provider, so no test reads UnicodeData.txt from disk or the network unless
it sets that up itself (tmp_path + httpx.MockTransport).
"""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from charfinder.application.services.matcher import NameIndex
from charfinder.domain.entities import CharacterEntry, Dataset
from charfinder.domain.exceptions import DataUnavailableException
from charfinder.infrastructure.unicode_data.provider import DatasetProvider
from charfinder.main import create_app

FIXTURES_DIR = Path(__file__).parent / "fixtures"

# Real UnicodeData.txt records, in registry order.
SAMPLE_UNICODE_DATA = """\
0020;SPACE;Zs;0;WS;;;;;N;;;;;
003C;LESS-THAN SIGN;Sm;0;ON;;;;;Y;;;;;
00AE;REGISTERED SIGN;So;0;ON;;;;;N;REGISTERED TRADE MARK SIGN;;;;
018D;LATIN SMALL LETTER TURNED DELTA;Ll;0;L;;;;;N;;;;;
023D;LATIN CAPITAL LETTER L WITH BAR;Lu;0;L;;;;;N;;;;019A;
1F5A5;DESKTOP COMPUTER;So;0;ON;;;;;N;;;;;
1F5D4;DESKTOP WINDOW;So;0;ON;;;;;N;;;;;
"""

SAMPLE_ENTRIES = [
    CharacterEntry(0x20, "SPACE"),
    CharacterEntry(0x3C, "LESS-THAN SIGN"),
    CharacterEntry(0xAE, "REGISTERED SIGN"),
    CharacterEntry(0x18D, "LATIN SMALL LETTER TURNED DELTA"),
    CharacterEntry(0x23D, "LATIN CAPITAL LETTER L WITH BAR"),
    CharacterEntry(0x1F5A5, "DESKTOP COMPUTER"),
    CharacterEntry(0x1F5D4, "DESKTOP WINDOW"),
]


class StaticLoader:
    """Loader double returning a fixed dataset (or failing), counting calls."""

    def __init__(
        self, entries: list[CharacterEntry] | None = None, fail: bool = False
    ) -> None:
        self.entries = tuple(SAMPLE_ENTRIES if entries is None else entries)
        self.fail = fail
        self.calls = 0

    async def load(self) -> Dataset:
        self.calls += 1
        if self.fail:
            raise DataUnavailableException(source="static")
        return Dataset(self.entries, NameIndex(self.entries))


@pytest.fixture
def sample_entries() -> list[CharacterEntry]:
    return list(SAMPLE_ENTRIES)


@pytest.fixture
def sample_data_file(tmp_path: Path) -> Path:
    """UnicodeData-format file with SAMPLE_UNICODE_DATA in a temp dir."""
    path = tmp_path / "UnicodeData.txt"
    path.write_text(SAMPLE_UNICODE_DATA, encoding="utf-8")
    return path


@pytest.fixture
async def client() -> AsyncClient:
    """Async HTTP client against an app serving SAMPLE_ENTRIES (ASGI)."""
    app = create_app(dataset_provider=DatasetProvider(StaticLoader()))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def unavailable_client() -> AsyncClient:
    """Async HTTP client against an app whose dataset never loads."""
    app = create_app(dataset_provider=DatasetProvider(StaticLoader(fail=True)))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def loader_cls() -> type[StaticLoader]:
    """The StaticLoader class, for tests that build their own providers."""
    return StaticLoader
