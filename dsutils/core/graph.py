# graph.py
# Weighted directed graph with BFS, DFS and Dijkstra shortest path.
# Nodes are plain objects compared by identity, so two nodes may hold the
# same value. Edges are stored on the source node only.

from __future__ import annotations

import heapq
import logging
import math
from collections import deque
from typing import Dict, Generic, Iterator, List, Optional, Sequence, Tuple, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
Weight = float


class InvalidNodeError(ValueError):
    """Raised when an edge endpoint does not belong to the graph."""


class GraphNode(Generic[T]):
    """
    A single vertex.
    value: opaque payload
    neighbors: target node -> edge weight (outgoing edges, insertion ordered)
    """

    __slots__ = ("value", "neighbors")

    def __init__(self, value: T) -> None:
        self.value = value
        self.neighbors: Dict[GraphNode[T], Weight] = {}

    def __repr__(self) -> str:
        return f"GraphNode({self.value!r})"


class Graph(Generic[T]):
    """
    Directed graph that owns the nodes it creates.
    For an undirected edge add both directions explicitly.
    Not thread safe: guard mutation with an external lock if shared.
    """

    def __init__(self) -> None:
        # node -> creation sequence number (used for Dijkstra tie-breaking)
        self._nodes: Dict[GraphNode[T], int] = {}

    # nodes/edges --------------------------------------------------------------
    def add_node(self, value: T) -> GraphNode[T]:
        """Create a node holding `value`, register it and return it."""
        node = GraphNode(value)
        self._nodes[node] = len(self._nodes)
        return node

    def add_edge(self, source: GraphNode[T], target: GraphNode[T], weight: Weight = 1) -> None:
        """
        Add (or overwrite) the directed edge source -> target.
        Both nodes must have been created by this graph.
        """
        if source not in self._nodes or target not in self._nodes:
            raise InvalidNodeError("Both nodes must exist in the graph")
        source.neighbors[target] = weight

    @property
    def nodes(self) -> List[GraphNode[T]]:
        """All nodes in creation order."""
        return list(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[GraphNode[T]]:
        return iter(self._nodes)

    # traversal ----------------------------------------------------------------
    def bfs(self, start: GraphNode[T]) -> List[GraphNode[T]]:
        """Breadth-first order from `start`. Nodes are marked when enqueued."""
        visited = {start}
        result: List[GraphNode[T]] = []
        queue = deque([start])

        while queue:
            current = queue.popleft()
            result.append(current)
            for neighbor in current.neighbors:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return result

    def dfs(self, start: GraphNode[T]) -> List[GraphNode[T]]:
        """
        Pre-order depth-first from `start`, neighbors in edge insertion order.
        Uses a stack of neighbor iterators instead of recursion, yielding the
        same order as the recursive version without the recursion limit.
        """
        visited = {start}
        result = [start]
        stack = [iter(start.neighbors)]

        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    result.append(neighbor)
                    stack.append(iter(neighbor.neighbors))
                    break
            else:
                stack.pop()
        return result

    # shortest path ------------------------------------------------------------
    def find_shortest_path(
        self, start: GraphNode[T], end: GraphNode[T]
    ) -> Optional[List[GraphNode[T]]]:
        """
        Dijkstra from `start` to `end` (weights assumed non-negative).
        Returns the node sequence [start, ..., end], or None if `end` is
        unreachable. Equal distances are settled in node creation order.
        """
        dist: Dict[GraphNode[T], Weight] = {start: 0}
        previous: Dict[GraphNode[T], GraphNode[T]] = {}
        settled = set()
        heap: List[Tuple[Weight, int, GraphNode[T]]] = [(0, self._seq(start), start)]

        while heap:
            d, _seq, current = heapq.heappop(heap)
            if current in settled:
                continue  # stale entry
            settled.add(current)
            if current is end:
                break

            for neighbor, weight in current.neighbors.items():
                if neighbor in settled:
                    continue
                nd = d + weight
                if nd < dist.get(neighbor, math.inf):
                    dist[neighbor] = nd
                    previous[neighbor] = current
                    heapq.heappush(heap, (nd, self._seq(neighbor), neighbor))

        if end not in dist:
            logger.debug("no path from %r to %r", start, end)
            return None

        path = [end]
        node = end
        while node is not start:
            node = previous[node]
            path.append(node)
        path.reverse()
        return path

    def path_weight(self, path: Sequence[GraphNode[T]]) -> Weight:
        """Sum of edge weights along `path` (0 for fewer than two nodes)."""
        total: Weight = 0
        for a, b in zip(path, path[1:]):
            if b not in a.neighbors:
                raise ValueError(f"No edge from {a!r} to {b!r}")
            total += a.neighbors[b]
        return total

    def _seq(self, node: GraphNode[T]) -> int:
        # nodes from another graph sort after our own, each with a distinct key
        seq = self._nodes.get(node)
        if seq is None:
            return len(self._nodes) + id(node)
        return seq
