# search/graphs.py
from __future__ import annotations

import heapq
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from zlib import crc32

import numpy as np

from aoc_search.search.distance import INFINITY, ZERO

Node = Hashable
Edge = tuple[int, Node]  # (cost, target)


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _crc32_u32(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


def graph_rng(seed: int, *parts: object) -> np.random.Generator:
    """
    Deterministic generator for one named graph.
    Keys are hashed independently, so drawing graph 17 never depends on graph 16.
    """
    entropy = [_u32(seed)]
    for p in parts:
        if isinstance(p, (int, np.integer)):
            entropy.append(_u32(int(p)))
        else:
            entropy.append(_crc32_u32(str(p)))
    return np.random.Generator(np.random.PCG64(np.random.SeedSequence(entropy)))


@dataclass
class WeightedGraph:
    adjacency: dict[Node, list[Edge]] = field(default_factory=dict)

    def add_node(self, u: Node) -> None:
        self.adjacency.setdefault(u, [])

    def add_edge(self, u: Node, v: Node, cost: int) -> None:
        if cost < 0:
            raise ValueError(f"edge {u!r}->{v!r} has negative cost {cost}")
        self.add_node(v)
        self.adjacency.setdefault(u, []).append((cost, v))

    def edges_from(self, u: Node) -> list[Edge]:
        return self.adjacency.get(u, [])

    @property
    def nodes(self) -> Iterable[Node]:
        return self.adjacency.keys()

    def state(self, u: Node) -> GraphState:
        return GraphState(self, u)


@dataclass(frozen=True)
class GraphState:
    """SearchState adapter over one node of an explicit graph."""

    graph: WeightedGraph = field(compare=False, hash=False, repr=False)
    node: Node

    def neighbors(self) -> list[tuple[int, GraphState]]:
        return [(c, GraphState(self.graph, v)) for c, v in self.graph.edges_from(self.node)]


def random_weighted_dag(
    rng: np.random.Generator,
    n_nodes: int,
    *,
    edge_prob: float = 0.3,
    max_cost: int = 20,
) -> WeightedGraph:
    """Nodes 0..n-1; edges only go from lower to higher ids, costs in [0, max_cost]."""
    g = WeightedGraph()
    for u in range(n_nodes):
        g.add_node(u)
    for u in range(n_nodes):
        for v in range(u + 1, n_nodes):
            if rng.random() < edge_prob:
                g.add_edge(u, v, int(rng.integers(0, max_cost + 1)))
    return g


def dijkstra_distance(graph: WeightedGraph, start: Node, goal: Node) -> int | None:
    """Reference shortest distance, no heuristic."""
    dist: dict[Node, float] = {start: ZERO}
    q: list[tuple[float, int, Node]] = [(ZERO, 0, start)]
    seq = 0
    while q:
        d, _, u = heapq.heappop(q)
        if d > dist.get(u, INFINITY):
            continue
        if u == goal:
            return d
        for c, v in graph.edges_from(u):
            nd = d + c
            if nd < dist.get(v, INFINITY):
                dist[v] = nd
                seq += 1
                heapq.heappush(q, (nd, seq, v))
    return None
