"""Tests for the charfinder console command."""

import pytest

from charfinder import cli
from charfinder.infrastructure.unicode_data import DatasetProviderFactory
from charfinder.infrastructure.unicode_data.provider import DatasetProvider


@pytest.fixture
def static_provider(monkeypatch: pytest.MonkeyPatch, loader_cls):
    """Make the command search SAMPLE_ENTRIES instead of UnicodeData.txt."""
    loader = loader_cls()

    def create_provider(settings=None, http_client=None) -> DatasetProvider:
        return DatasetProvider(loader)

    monkeypatch.setattr(DatasetProviderFactory, "create_provider", staticmethod(create_provider))
    return loader


async def test_prints_matches(static_provider, capsys) -> None:
    status = await cli.run(["sign"])
    assert status == 0
    assert capsys.readouterr().out == (
        "U+003C\t<\tLESS-THAN SIGN\n"
        "U+00AE\t®\tREGISTERED SIGN\n"
    )


async def test_no_matches(static_provider, capsys) -> None:
    status = await cli.run(["octopus"])
    captured = capsys.readouterr()
    assert status == 1
    assert captured.out == ""
    assert "Could not find any results" in captured.err


async def test_blank_word(static_provider, capsys) -> None:
    status = await cli.run(["-"])
    assert status == 2
    assert "Empty query given" in capsys.readouterr().err


def test_usage_without_words(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 2
    assert "Usage" in capsys.readouterr().err
