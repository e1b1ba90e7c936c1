"""Community Detector - Iterative maximal k-core extraction with expansion.

Each round finds the maximal k-core among the vertices not yet assigned,
labels it as a new community, then pulls in every unassigned vertex with
enough edges into that core. Rounds stop when nothing is left or no core
exists. Vertices never reached are left out of the result.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Collection, Iterable

from graphbench.graph.adjacency import Adjacency
from graphbench.graph.model import Graph

logger = logging.getLogger(__name__)

DEFAULT_START_K = 2
DEFAULT_EXPANSION_THRESHOLD = 2


def k_core(adjacency: Adjacency, vertices: Iterable[str], k: int) -> set[str]:
    """Peel vertices until every survivor has degree >= k among survivors.

    Restricted degrees are computed once. Vertices below k go on a queue;
    removing one decrements its surviving neighbours, which join the queue
    when they drop below k. Each incident pair is visited at most twice,
    so one call is O(V + E).

    Args:
        adjacency: Index over (at least) the candidate vertices.
        vertices: Candidate vertex ids.
        k: Minimum degree.

    Returns:
        The k-core, possibly empty.
    """
    current = set(vertices)
    degree = {v: adjacency.degree(v, among=current) for v in current}
    queue = deque(v for v in current if degree[v] < k)
    removed = set(queue)

    while queue:
        vertex = queue.popleft()
        for _, neighbor in adjacency.incident(vertex):
            # Self-loops land here too: the vertex is already removed
            if neighbor in removed or neighbor not in current:
                continue
            degree[neighbor] -= 1
            if degree[neighbor] < k:
                removed.add(neighbor)
                queue.append(neighbor)

    return current - removed


def maximal_core(graph: Graph, vertices: Collection[str], start_k: int = DEFAULT_START_K) -> set[str]:
    """Return the non-empty k-core with the largest k >= start_k.

    Cores nest, so each k is peeled from the previous core rather than
    from the full `vertices` set. k never goes past the maximum degree in
    the induced subgraph, since no core can exist there. Each k costs
    O(V + E).

    Returns:
        The maximal core, or an empty set if even start_k has none.
    """
    adjacency = Adjacency(graph, within=vertices)
    bound = adjacency.max_degree()
    best: set[str] = set()
    candidates: Iterable[str] = adjacency.vertices()
    k = start_k
    while k <= bound:
        core = k_core(adjacency, candidates, k)
        if not core:
            break
        best = core
        candidates = core
        k += 1
    if best:
        logger.debug("Maximal core: k=%d, %d vertices", k - 1, len(best))
    return best


def find_communities(
    graph: Graph,
    start_k: int = DEFAULT_START_K,
    expansion_threshold: int = DEFAULT_EXPANSION_THRESHOLD,
) -> dict[str, int]:
    """Partition vertices into communities by core expansion.

    Args:
        graph: Graph to analyze. It is not modified.
        start_k: Smallest core order tried in each round.
        expansion_threshold: Edges into the new core an unassigned vertex
            needs to join it. Expansion is a single pass per round.

    Returns:
        Mapping of vertex id to community id (0, 1, 2, ...). Vertices in
        no core and no expansion are absent.

    Raises:
        ValueError: If start_k or expansion_threshold is below 1.
    """
    if start_k < 1:
        raise ValueError(f"start_k must be >= 1, got {start_k}")
    if expansion_threshold < 1:
        raise ValueError(f"expansion_threshold must be >= 1, got {expansion_threshold}")

    full = Adjacency(graph)
    # dict keeps vertex-map order for deterministic assignment
    uncovered: dict[str, None] = dict.fromkeys(graph.vertices)
    communities: dict[str, int] = {}
    community_id = 0

    while uncovered:
        core = maximal_core(graph, uncovered.keys(), start_k)
        if not core:
            break

        for vertex_id in [v for v in uncovered if v in core]:
            communities[vertex_id] = community_id
            del uncovered[vertex_id]

        expansion = [v for v in uncovered if full.degree(v, among=core) >= expansion_threshold]
        for vertex_id in expansion:
            communities[vertex_id] = community_id
            del uncovered[vertex_id]

        logger.debug(
            "Community %d: core of %d, expanded by %d",
            community_id,
            len(core),
            len(expansion),
        )
        community_id += 1

    logger.debug(
        "Found %d communities covering %d of %d vertices",
        community_id,
        len(communities),
        len(graph.vertices),
    )
    return communities


__all__ = [
    "DEFAULT_START_K",
    "DEFAULT_EXPANSION_THRESHOLD",
    "k_core",
    "maximal_core",
    "find_communities",
]
