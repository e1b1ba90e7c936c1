"""Test helpers for building graphs and checking analyzers by brute force.

The oracles here are deliberately naive (quadratic or exponential) so they
can serve as an independent reference on small graphs.
"""

from __future__ import annotations

import itertools
import random
from collections.abc import Iterable, Sequence

from graphbench.graph import Edge, Graph, Vertex

# === Graph factories ===


def make_graph(
    edges: Iterable[tuple[str, str] | tuple[str, str, float]],
    vertices: Iterable[str] | None = None,
) -> Graph:
    """Build a Graph from (source, target[, weight]) tuples.

    Args:
        edges: Edge tuples; weight defaults to 1.0.
        vertices: Vertex ids in order. Defaults to every endpoint, in
            first-seen order.
    """
    edge_list = [Edge(e[0], e[1], float(e[2]) if len(e) > 2 else 1.0) for e in edges]
    if vertices is None:
        ids = list(dict.fromkeys(vid for e in edge_list for vid in (e.source, e.target)))
    else:
        ids = list(vertices)
    return Graph(vertices={vid: Vertex(vid) for vid in ids}, edges=edge_list)


def random_multigraph(rng: random.Random, max_vertices: int = 7, max_edges: int = 10) -> Graph:
    """Random small graph, possibly disconnected, with loops and parallels."""
    n = rng.randint(1, max_vertices)
    ids = [f"V{i}" for i in range(n)]
    m = rng.randint(0, max_edges)
    edges = [
        (rng.choice(ids), rng.choice(ids), float(rng.randint(1, 5)))
        for _ in range(m)
    ]
    return make_graph(edges, vertices=ids)


# === Oracles ===


def component_count(vertex_ids: Sequence[str], edges: Iterable[Edge]) -> int:
    """Count connected components by repeated flood fill."""
    neighbours: dict[str, set[str]] = {v: set() for v in vertex_ids}
    for e in edges:
        if e.source in neighbours and e.target in neighbours:
            neighbours[e.source].add(e.target)
            neighbours[e.target].add(e.source)

    seen: set[str] = set()
    count = 0
    for start in vertex_ids:
        if start in seen:
            continue
        count += 1
        frontier = [start]
        seen.add(start)
        while frontier:
            v = frontier.pop()
            for w in neighbours[v]:
                if w not in seen:
                    seen.add(w)
                    frontier.append(w)
    return count


def brute_force_bridge_indices(graph: Graph) -> set[int]:
    """Indices of edges whose removal increases the component count."""
    ids = list(graph.vertices)
    base = component_count(ids, graph.edges)
    result = set()
    for i in range(len(graph.edges)):
        rest = graph.edges[:i] + graph.edges[i + 1 :]
        if component_count(ids, rest) > base:
            result.add(i)
    return result


def indices_of(graph: Graph, edges: Iterable[Edge]) -> set[int]:
    """Positions of the given edge objects (by identity) in graph.edges."""
    wanted = {id(e) for e in edges}
    return {i for i, e in enumerate(graph.edges) if id(e) in wanted}


def is_acyclic(vertex_ids: Sequence[str], edges: Sequence[Edge]) -> bool:
    """A forest has exactly V - components edges."""
    return len(edges) == len(vertex_ids) - component_count(vertex_ids, edges)


def brute_force_min_forest_weight(graph: Graph) -> float:
    """Smallest total weight of a spanning forest, by exhaustive search."""
    ids = list(graph.vertices)
    usable = [e for e in graph.edges if e.source in graph.vertices and e.target in graph.vertices]
    size = len(ids) - component_count(ids, usable)
    best = None
    for subset in itertools.combinations(usable, size):
        if is_acyclic(ids, subset):
            weight = sum(e.weight for e in subset)
            if best is None or weight < best:
                best = weight
    return 0.0 if best is None else best


def naive_k_core(graph: Graph, vertices: Iterable[str], k: int) -> set[str]:
    """k-core by whole-set passes, recounting every degree each pass."""
    current = set(vertices)
    while True:
        below = set()
        for v in current:
            count = 0
            for e in graph.edges:
                if e.is_loop:
                    count += e.source == v
                elif (e.source == v and e.target in current) or (e.target == v and e.source in current):
                    count += 1
            if count < k:
                below.add(v)
        if not below:
            return current
        current -= below
