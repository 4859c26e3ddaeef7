"""Shared pytest fixtures and test helpers for shopnet tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from shopnet.domain.network import ShopNetwork

# Scenario networks used across domain, service, and command tests.
STAR_WITH_CHORD = [(1, 2), (1, 3), (1, 4), (2, 3)]  # result 0
TWIN_HUBS = [(1, 2), (1, 3), (1, 4), (2, 5), (2, 6)]  # result 2
SINGLE_ROAD = [(1, 2)]  # result 2


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root and shopnet logger state changed by configure_logging."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    shopnet_logger = logging.getLogger("shopnet")
    shopnet_level = shopnet_logger.level
    yield
    root.handlers = saved_handlers
    root.setLevel(saved_level)
    shopnet_logger.setLevel(shopnet_level)


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep stray shopnet.toml files and SHOPNET_* env vars out of tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHOPNET_CONFIG", raising=False)
    monkeypatch.delenv("SHOPNET_INPUT__STRICT_ROAD_TO", raising=False)


@pytest.fixture
def write_input(tmp_path: Path) -> Callable[..., Path]:
    """Write a road-list file and return its path.

    Pass ``roads`` for a well-formed file with a matching header, or
    ``text`` for raw content.
    """

    def _write(
        roads: list[tuple[int, int]] | None = None,
        *,
        text: str | None = None,
        num_shops: int | None = None,
        name: str = "roads.txt",
    ) -> Path:
        if text is None:
            roads = roads or []
            shops = num_shops or max(2, len({s for road in roads for s in road}))
            text = f"{shops} {len(roads)}\n" + "".join(f"{u} {v}\n" for u, v in roads)
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


def build_network(roads: list[tuple[int, int]]) -> ShopNetwork:
    """Build a frozen network from road pairs."""
    return ShopNetwork.from_edges(roads)
