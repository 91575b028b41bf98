# main.py
import argparse
import logging
import random
import sys
import time
from typing import Dict, List, Optional, Tuple

import networkx as nx
from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

from graph import Graph, graph_from_edges
from euler import edges_from_trail, find_euler_trail, is_euler_trail, solve_euler_trail

# ============================================================
# Default params
# ============================================================
DEFAULT_PRINT_LIMIT = 100 # max route items printed unless --print-full-route
DEFAULT_STRESS_VERTICES = 7 # vertices per random graph in the stress check
DEFAULT_STRESS_EDGES = 12 # upper bound on edges per random graph
DEFAULT_SEED = 42

SAMPLE_EDGES: Dict[str, List[Tuple[int, int]]] = {
    # has an Euler circuit
    "circuit": [(1, 2), (1, 3), (1, 4), (1, 5), (2, 3), (2, 5),
                (2, 6), (3, 6), (3, 7), (4, 5), (5, 6), (6, 7)],
    # has an Euler path
    "path": [(1, 2), (1, 4), (2, 3), (2, 4), (3, 5), (4, 5)],
    # non-Eulerian
    "none": [(1, 2), (1, 3), (1, 4), (1, 5), (2, 3), (2, 5),
             (3, 6), (4, 5), (4, 6), (5, 6)],
}

# ============================================================
# CLI & Logging
# ============================================================
def build_argparser():
    p = argparse.ArgumentParser(description="Euler trail finder")

    # Graph selection
    p.add_argument("--sample", choices=["circuit", "path", "none", "all"], default="all")
    # circuit = all degrees even, path = two odd vertices, none = four odd vertices
    p.add_argument("--edge", nargs="+", type=int, action="append", metavar="V",
                   help="Add edge U V [W] to a custom graph (repeatable); replaces the samples")

    # Print route options
    p.add_argument("--print-edges", action="store_true", help="Print the route as a list of edges")
    p.add_argument("--print-full-route", action="store_true", help="Print the full route (can be huge!)")
    p.add_argument("--print-limit", type=int, default=DEFAULT_PRINT_LIMIT)
    p.add_argument("--summary", action="store_true", help="Print a summary of each solution")

    # Stress check
    p.add_argument("--stress", type=int, default=0, metavar="N",
                   help="Check the finder against networkx on N random graphs")
    p.add_argument("--stress-vertices", type=int, default=DEFAULT_STRESS_VERTICES)
    p.add_argument("--stress-edges", type=int, default=DEFAULT_STRESS_EDGES)
    p.add_argument("--seed", type=int, default=DEFAULT_SEED)

    p.add_argument("-v", "--verbose", action="count", default=0)
    # verbosity: 0=warning, 1=info, 2=debug
    return p


def configure_logging(verbosity: int):
    """Configure logging level based on verbosity.
    Parameters
    ----------
    verbosity : int
        0 = warning, 1 = info, 2 = debug
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
    )

# ============================================================
# Sample graphs
# ============================================================
def sample_graphs() -> Dict[str, Graph]:
    '''
    The three demonstration graphs, keyed by name.
    '''
    return {name: graph_from_edges(edges) for name, edges in SAMPLE_EDGES.items()}

def custom_graph(edge_args: List[List[int]]) -> Graph:
    '''
    Build an undirected graph from --edge values ([u, v] or [u, v, w]).
    '''
    for e in edge_args:
        if len(e) not in (2, 3):
            raise ValueError(f"--edge expects U V [W], got {len(e)} values")
    return graph_from_edges([tuple(e) for e in edge_args])

# ============================================================
# Route & printing utils
# ============================================================
def format_trail(trail: List) -> str:
    '''
    One-line rendering: "Euler Path:  1 2 3", or "Euler Path: none." if empty.
    '''
    if not trail:
        return "Euler Path: none."
    return "Euler Path: " + "".join(f" {v}" for v in trail)

def print_route_to_console(trail: List, print_edges: bool = False,
                           limit: int = DEFAULT_PRINT_LIMIT, full: bool = False):
    '''
    Print route to console, either as list of edges or list of vertices.
    If full is False and route is longer than limit, print head and tail with ellipsis.
    '''
    if not print_edges:
        if full or len(trail) <= limit:
            print(format_trail(trail))
        else:
            head, tail = trail[: limit//2], trail[-(limit - limit//2):]
            print(format_trail(head + ["..."] + tail))
        return
    eds = edges_from_trail(trail)
    print(f"Route (edges) count = {len(eds)}")
    if full or len(eds) <= limit:
        print(eds)
    else:
        head, tail = eds[: limit//2], eds[-(limit - limit//2):]
        print(head + [("...", "...")] + tail)

def print_summary(meta: Dict, g: Graph, trail: List):
    '''
    Print solution summary to the console.
    '''
    print("=== Solution Summary ===")
    print(f"Resolution mode        : {meta.get('mode')}")
    print(f"Total vertices         : {len(g)}")
    print(f"Total edges            : {g.edge_count()}")
    print(f"Odd-degree vertices (k): {meta.get('k')}")
    print(f"Start vertex           : {meta.get('start', '-')}")
    print(f"Spliced detours        : {meta.get('spliced', '-')}")
    print(f"Final trail length     : {len(trail)}")
    print(f"Total time             : {meta.get('total_time_sec')} s")
    print("========================\n")

# ============================================================
# Stress check
# ============================================================
def graph_from_networkx(G: nx.Graph) -> Graph:
    '''
    Copy an undirected networkx graph, isolated nodes included.
    '''
    g: Graph = Graph()
    for v in G.nodes:
        g.add_vertex(v)
    for u, v in G.edges:
        g.add_edge(u, v)
    return g

def expected_has_trail(G: nx.Graph) -> bool:
    '''
    Reference answer from networkx, ignoring isolated nodes. A graph with
    no edges counts as having no trail.
    '''
    H = G.subgraph([v for v, d in G.degree() if d > 0]).copy()
    if H.number_of_edges() == 0:
        return False
    return nx.has_eulerian_path(H)

def random_graph(rng: random.Random, n: int, max_edges: int) -> nx.Graph:
    m = rng.randint(0, min(max_edges, n * (n - 1) // 2))
    return nx.gnm_random_graph(n, m, seed=rng.randrange(2**32))

def run_stress(count: int, n: int, max_edges: int, seed: int) -> int:
    '''
    Run the finder on count random graphs and compare with networkx.
    Returns the number of mismatches.
    '''
    rng = random.Random(seed)
    mismatches = 0
    found = 0
    with logging_redirect_tqdm():
        for i in tqdm(range(count), desc=f"stress (n={n})"):
            G = random_graph(rng, n, max_edges)
            g = graph_from_networkx(G)
            trail = find_euler_trail(g)
            expected = expected_has_trail(G)
            ok = is_euler_trail(g, trail) if expected else not trail
            if trail:
                found += 1
            if not ok:
                mismatches += 1
                logging.error(f"Mismatch on graph #{i}: edges={sorted(G.edges)} trail={trail}")
    logging.info(f"Stress: {count} graphs, {found} with a trail, {mismatches} mismatches")
    return mismatches

# ============================================================
# Main
# ============================================================
def solve_and_print(g: Graph, args) -> List:
    t0 = time.time()
    trail, meta = solve_euler_trail(g)
    meta["total_time_sec"] = round(time.time() - t0, 3)

    print(g)
    print_route_to_console(trail, print_edges=args.print_edges,
                           limit=args.print_limit, full=args.print_full_route)
    print()
    if args.summary:
        print_summary(meta, g, trail)
    return trail

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_argparser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.stress:
        mismatches = run_stress(args.stress, args.stress_vertices, args.stress_edges, args.seed)
        print(f"Stress check: {args.stress} graphs, {mismatches} mismatches")
        return 1 if mismatches else 0

    if args.edge:
        try:
            g = custom_graph(args.edge)
        except ValueError as e:
            parser.error(str(e))
        solve_and_print(g, args)
        return 0

    graphs = sample_graphs()
    names = list(graphs) if args.sample == "all" else [args.sample]
    for name in names:
        logging.info(f"Sample graph '{name}'")
        solve_and_print(graphs[name], args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
