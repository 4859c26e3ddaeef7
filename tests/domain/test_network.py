"""Tests for ShopNetwork — the graph store."""

from __future__ import annotations

import pytest

from shopnet.domain.network import Shop, ShopNetwork
from tests.conftest import STAR_WITH_CHORD, build_network


class TestGetOrCreate:
    def test_creates_empty_shop(self) -> None:
        network = ShopNetwork()
        shop = network.get_or_create(7)
        assert shop.identifier == 7
        assert shop.neighbors == []
        assert 7 in network

    def test_returns_existing_shop(self) -> None:
        network = ShopNetwork()
        first = network.get_or_create(3)
        assert network.get_or_create(3) is first
        assert network.total_nodes() == 1


class TestAddEdge:
    def test_symmetric_insertion(self) -> None:
        network = ShopNetwork()
        network.add_edge(1, 2)
        assert network.lookup(1).neighbors == [2]  # type: ignore[union-attr]
        assert network.lookup(2).neighbors == [1]  # type: ignore[union-attr]

    def test_duplicate_roads_are_kept(self) -> None:
        network = ShopNetwork()
        network.add_edge(1, 2)
        network.add_edge(2, 1)
        assert network.degree(1) == 2
        assert network.degree(2) == 2
        assert network.total_directed_links() == 4

    def test_self_loop_counts_twice(self) -> None:
        network = ShopNetwork()
        network.add_edge(5, 5)
        assert network.total_nodes() == 1
        assert network.lookup(5).neighbors == [5, 5]  # type: ignore[union-attr]
        assert network.degree(5) == 2

    def test_neighbor_order_is_insertion_order(self) -> None:
        network = ShopNetwork()
        for other in (4, 2, 9, 2):
            network.add_edge(1, other)
        assert network.lookup(1).neighbors == [4, 2, 9, 2]  # type: ignore[union-attr]

    def test_no_dangling_references(self) -> None:
        network = build_network([(1, 2), (3, 1), (2, 2), (4, 900)])
        for shop in network.shops():
            for neighbor in shop.neighbors:
                assert neighbor in network

    def test_frozen_network_rejects_roads(self) -> None:
        network = build_network([(1, 2)])
        assert network.frozen
        with pytest.raises(RuntimeError):
            network.add_edge(2, 3)


class TestQueries:
    def test_lookup_missing_returns_none(self) -> None:
        assert ShopNetwork().lookup(1) is None

    def test_degree_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            ShopNetwork().degree(1)

    def test_degrees_of_scenario(self) -> None:
        network = build_network(STAR_WITH_CHORD)
        assert {s.identifier: s.degree for s in network.shops()} == {1: 3, 2: 2, 3: 2, 4: 1}

    def test_totals(self) -> None:
        roads = [(1, 2), (1, 1), (1, 2)]
        network = build_network(roads)
        assert network.total_nodes() == 2
        assert len(network) == 2
        assert network.total_directed_links() == 2 * len(roads)

    def test_shops_in_ascending_order(self) -> None:
        network = build_network([(9, 3), (5, 1)])
        assert [s.identifier for s in network.shops()] == [1, 3, 5, 9]

    def test_connections_dump_order(self) -> None:
        network = build_network([(2, 1), (1, 3)])
        assert list(network.connections()) == [(1, 2), (1, 3), (2, 1), (3, 1)]

    def test_shop_degree_property(self) -> None:
        assert Shop(1, [2, 3, 2]).degree == 3
