# euler.py
from __future__ import annotations

import logging
import time
from typing import Dict, List, Set, Tuple

from graph import Graph

logger = logging.getLogger(__name__)

# ============================================================
# Degree & connectivity utils
# ============================================================
def odd_degree_vertices(g: Graph) -> List:
    '''
    Return list of vertices with odd degree, in vertex order.
    '''
    return [u for u in g.vertices() if g.degree(u) % 2 == 1]

def non_isolated_vertices(g: Graph) -> List:
    '''
    Return vertices with at least one edge, in vertex order.
    '''
    return [u for u in g.vertices() if g.degree(u) > 0]

def is_connected_on_non_isolated(g: Graph) -> bool:
    '''
    Check if graph is connected ignoring isolated vertices.
    '''
    active = non_isolated_vertices(g)
    if not active:
        return True
    visited: Set = set()
    stack = [active[0]]
    # Depth-first search
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        for v in g.neighbors(u):
            if v not in visited:
                stack.append(v)
    return visited == set(active)

def edges_from_trail(trail: List) -> List[Tuple]:
    '''
    Convert trail of vertices to list of edges (u,v).
    '''
    return [(trail[i], trail[i + 1]) for i in range(len(trail) - 1)]

def is_euler_trail(g: Graph, trail: List) -> bool:
    '''
    True if trail walks along edges of g and uses each of them exactly once.
    An edgeless graph only accepts the empty trail.
    '''
    if g.edge_count() == 0:
        return not trail
    remaining = g.copy()
    for u, v in edges_from_trail(trail):
        if not remaining.is_edge(u, v):
            return False
        remaining.remove_edge(u, v)
    return remaining.edge_count() == 0

# ============================================================
# Greedy walk
# ============================================================
def _walk(work: Graph, start) -> List:
    '''
    Walk from start, deleting each edge as it is used, until stuck.

    At every step the first remaining neighbor other than start is taken;
    start itself is taken only when it is the last option left.
    '''
    walk = [start]
    u = start
    while work.degree(u):
        v_next = None  # next vertex on the walk, None until found
        for v in work.neighbors(u):
            if v != start:
                v_next = v
                break
        if v_next is None:
            # start is the only neighbor left
            v_next = start
        work.remove_edge(u, v_next)
        walk.append(v_next)
        u = v_next
    return walk

def greedy_euler_trail(g: Graph, start) -> Tuple[List, int]:
    '''
    Build an Euler trail of g from start using the greedy walk.

    g is not modified; the walk consumes a working copy. If the walk strands
    edges, closed detours are walked (same rule) from the earliest trail
    vertex that still has edges and spliced in there, until none remain.
    Assumes g is connected over its edges and start is a valid start vertex.

    Returns the trail and the number of detours spliced in.
    '''
    work = g.copy()
    trail = _walk(work, start)
    spliced = 0
    i = 0
    while i < len(trail):
        u = trail[i]
        if not work.degree(u):
            i += 1
            continue
        # every remaining degree is even here, so the detour closes at u
        detour = _walk(work, u)
        logger.debug(f"Splicing detour of {len(detour) - 1} edges at {u!r}")
        trail[i:i + 1] = detour
        spliced += 1
    return trail, spliced

# ============================================================
# Orchestration
# ============================================================
def choose_start(g: Graph, odds: List):
    '''
    First odd-degree vertex if any, else first vertex with an edge.
    None if the graph has no edges.
    '''
    if odds:
        return odds[0]
    active = non_isolated_vertices(g)
    return active[0] if active else None

def solve_euler_trail(g: Graph) -> Tuple[List, Dict]:
    '''
    Find an Euler trail of undirected graph g.

        If the graph has:
        0 odd-degree vertices → the trail is a circuit, from the first vertex with an edge.
        2 odd-degree vertices → the trail is an open path from the first odd vertex to the other.
        otherwise → no Euler trail exists.

    Graphs with no edges, and graphs whose edges are split over several
    components, give an empty trail.

    Returns the trail and a meta dict (mode, k, error, spliced, timings_sec).
    '''
    if g.directed:
        raise ValueError("Euler trail search requires an undirected graph")
    timings = {}

    t0 = time.time()
    odds = odd_degree_vertices(g)
    k = len(odds)
    timings["degrees_sec"] = round(time.time() - t0, 3)
    logger.info(f"Odd-degree vertices: k={k}")

    if k not in (0, 2):
        logger.info(f"{k} odd-degree vertices; no Euler trail exists.")
        return [], {"mode": "none", "k": k, "error": "odd_vertices", "timings_sec": timings}

    start = choose_start(g, odds)
    if start is None:
        logger.info("Graph has no edges; trail is empty.")
        return [], {"mode": "empty", "k": 0, "timings_sec": timings}

    # Connexity
    t1 = time.time()
    connected = is_connected_on_non_isolated(g)
    timings["connectivity_sec"] = round(time.time() - t1, 3)
    if not connected:
        logger.info("Graph is not connected on its non-isolated vertices; no Euler trail exists.")
        return [], {"mode": "none", "k": k, "error": "not_connected", "timings_sec": timings}

    t2 = time.time()
    trail, spliced = greedy_euler_trail(g, start)
    timings["walk_sec"] = round(time.time() - t2, 3)

    mode = "closed_direct" if k == 0 else "open_direct"
    logger.info(f"Euler trail ({mode}) from {start!r}: {len(trail) - 1} edges, {spliced} detours")
    meta = {"mode": mode, "k": k, "start": start, "spliced": spliced, "timings_sec": timings}
    return trail, meta

def find_euler_trail(g: Graph) -> List:
    '''
    Return the vertices of an Euler trail of g in visiting order, or an
    empty list if g has none. g is left unchanged.
    '''
    trail, _ = solve_euler_trail(g)
    return trail
