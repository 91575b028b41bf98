# graph.py
from __future__ import annotations

import logging
from typing import Dict, Generic, Hashable, Iterator, Tuple, TypeVar

T = TypeVar("T", bound=Hashable)

DEFAULT_WEIGHT = 1

logger = logging.getLogger(__name__)


def _validate_vertex(v) -> None:
    try:
        hash(v)
    except TypeError as e:
        raise TypeError(f"Vertex must be hashable; got {type(v).__name__}") from e


def _validate_weight(w) -> None:
    if isinstance(w, bool) or not isinstance(w, int) or w < 1:
        raise ValueError(f"Edge weight must be a positive integer; got {w!r}")


# ============================================================
# Graph
# ============================================================
class Graph(Generic[T]):
    ''' Weighted graph stored as an adjacency map.

    Each vertex maps to a dict of its out-neighbors and the weight of the
    edge leading to each one. A vertex with no outgoing edge keeps an empty
    dict, so "in the graph" means "is a key of the adjacency map".

    When ``directed`` is False every write is mirrored, so edge (v1, v2)
    exists iff (v2, v1) exists, with the same weight.

    Vertices must be hashable and mutually orderable: every listing
    (vertices, neighbors, rendering) is in ascending vertex order.

    Attributes
    ----------
    directed : bool
        False for an undirected graph (symmetric writes).

    Methods
    -------
    add_vertex(v), add_edge(v1, v2, w=1), update_edge(v1, v2, w)
        Construction.
    remove_edge(v1, v2), remove(v)
        Removal; no-ops when the target is absent.
    is_vertex, is_edge, weight, degree, degree_in, degree_out,
    neighbors, neighbors_in, vertices, edges
        Queries; an absent vertex reads as having no edges.
    '''

    def __init__(self, directed: bool = False):
        self.directed = directed
        self._adj: Dict[T, Dict[T, int]] = {}

    # ---------- internal helpers ----------

    def _write(self, v1: T, v2: T, w: int) -> None:
        self._adj.setdefault(v1, {})[v2] = w
        self._adj.setdefault(v2, {})
        if not self.directed:
            self._adj[v2][v1] = w

    def _erase(self, v1: T, v2: T) -> None:
        if v1 in self._adj:
            self._adj[v1].pop(v2, None)
        if not self.directed and v2 in self._adj:
            self._adj[v2].pop(v1, None)

    # ---------- mutation ----------

    def add_vertex(self, v: T) -> None:
        '''
        Add v with no edges. Does nothing if v already exists.
        '''
        _validate_vertex(v)
        self._adj.setdefault(v, {})

    def add_edge(self, v1: T, v2: T, w: int = DEFAULT_WEIGHT) -> None:
        '''
        Add an edge from v1 to v2 (both ways if undirected), creating the
        endpoints as needed. An existing edge keeps its weight; use
        update_edge to change it.
        '''
        _validate_vertex(v1)
        _validate_vertex(v2)
        _validate_weight(w)
        if not self.is_edge(v1, v2):
            self._write(v1, v2, w)
            logger.debug(f"Added edge {v1!r}->{v2!r} (w={w})")

    def update_edge(self, v1: T, v2: T, w: int) -> None:
        '''
        Set the weight of the edge from v1 to v2, adding the edge and its
        endpoints if absent.
        '''
        _validate_vertex(v1)
        _validate_vertex(v2)
        _validate_weight(w)
        self._write(v1, v2, w)

    def remove_edge(self, v1: T, v2: T) -> None:
        self._erase(v1, v2)

    def remove(self, v: T) -> None:
        '''
        Remove vertex v and every edge touching it, in either direction.
        '''
        if v not in self._adj:
            return
        for nbrs in self._adj.values():
            nbrs.pop(v, None)
        del self._adj[v]
        logger.debug(f"Removed vertex {v!r}")

    # ---------- queries ----------

    def is_vertex(self, v: T) -> bool:
        return v in self._adj

    def is_edge(self, v1: T, v2: T) -> bool:
        return v1 in self._adj and v2 in self._adj[v1]

    def weight(self, v1: T, v2: T) -> int:
        '''
        Weight of the edge from v1 to v2, or 0 if there is no such edge.
        '''
        return self._adj.get(v1, {}).get(v2, 0)

    def degree_out(self, v: T) -> int:
        return len(self._adj.get(v, ()))

    def degree_in(self, v: T) -> int:
        if not self.directed:
            return self.degree_out(v)
        return sum(1 for nbrs in self._adj.values() if v in nbrs)

    def degree(self, v: T) -> int:
        '''
        Number of outgoing edges of v; for an undirected graph this is the
        number of edges attached to v. Zero if v does not exist.
        '''
        return self.degree_out(v)

    def neighbors(self, v: T) -> Tuple[T, ...]:
        return tuple(sorted(self._adj.get(v, ())))

    def neighbors_in(self, v: T) -> Tuple[T, ...]:
        return tuple(sorted(u for u, nbrs in self._adj.items() if v in nbrs))

    def vertices(self) -> Tuple[T, ...]:
        return tuple(sorted(self._adj))

    def edges(self) -> Tuple[Tuple[T, T, int], ...]:
        '''
        All edges as (v1, v2, w). Undirected edges are listed once, as the
        ordered pair with v1 <= v2.
        '''
        out = []
        for u in self.vertices():
            for v in sorted(self._adj[u]):
                if self.directed or not v < u:
                    out.append((u, v, self._adj[u][v]))
        return tuple(out)

    def edge_count(self) -> int:
        return len(self.edges())

    def copy(self) -> "Graph[T]":
        '''
        Independent copy: mutating one graph never affects the other.
        '''
        g: Graph[T] = Graph(directed=self.directed)
        g._adj = {u: dict(nbrs) for u, nbrs in self._adj.items()}
        return g

    # ---------- dunder ----------

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, v: T) -> bool:
        return v in self._adj

    def __iter__(self) -> Iterator[T]:
        return iter(self.vertices())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Graph):
            return NotImplemented
        return self.directed == other.directed and self._adj == other._adj

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={len(self)}, edges={self.edge_count()})"

    def __str__(self) -> str:
        '''
        Text dump: vertex count, then one line per vertex listing its
        out-neighbors with their weights.
        '''
        lines = [f"Vertex count: {len(self)}"]
        for u in self.vertices():
            nbrs = "".join(f" {v}({self._adj[u][v]})" for v in self.neighbors(u))
            lines.append(f"{u}:{nbrs}")
        return "\n".join(lines) + "\n"


def DiGraph() -> Graph:
    '''
    Empty directed graph.
    '''
    return Graph(directed=True)


def UndirectedGraph() -> Graph:
    '''
    Empty undirected graph.
    '''
    return Graph(directed=False)


def graph_from_edges(edges, directed: bool = False) -> Graph:
    '''
    Build a graph from (v1, v2) or (v1, v2, w) tuples. If no weight, assume
    weight=1. Repeated pairs keep the first weight seen.
    '''
    g: Graph = Graph(directed=directed)
    for e in edges:
        if len(e) >= 3:
            g.add_edge(e[0], e[1], e[2])
        else:
            g.add_edge(e[0], e[1])
    return g
