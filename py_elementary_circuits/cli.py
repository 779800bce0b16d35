#!/usr/bin/env python3
"""Find all elementary circuits of a directed graph given as an edge list"""

import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path

from . import __version__
from .files import get_outputs_file_paths, read_graph
from .graph import DirectedGraph
from .graphs import make_graph
from .johnson import find_circuits, NO_MAX_LIMIT, NO_MIN_LIMIT
from .log import debug, logger, setup_logging
from .scc import get_decomposer


def _parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=__doc__,
        formatter_class=argparse.RawTextHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=__version__,
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="show additional information for debug purposes",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="show circuits if some are found",
    )
    parser.add_argument(
        "--outputs-folder",
        help=(
            "path to outputs folder. If not set"
            " $HOME/.local/py-elementary-circuits/outputs/ is used"
        ),
    )
    parser.add_argument(
        "--outputs-filename",
        help="outputs filename. If not set the current timestamp is used",
    )
    parser.add_argument(
        "--graph",
        action="store_true",
        help="write graphviz source of the circuits",
    )
    parser.add_argument(
        "--numeric",
        action="store_true",
        help="vertices are integers and ordered numerically",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=NO_MIN_LIMIT,
        help="only report circuits with at least this number of vertices",
    )
    parser.add_argument(
        "--max-length",
        type=int,
        default=NO_MAX_LIMIT,
        help="only report circuits with at most this number of vertices",
    )
    parser.add_argument(
        "--scc",
        choices=["tarjan", "networkx"],
        default="tarjan",
        help="strongly connected components algorithm",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        default=0,
        help="Tolerate a certain number of circuits, ie. an upper threshold.",
    )
    parser.add_argument(
        "edges",
        help=(
            "path to edge list, one edge 'FROM TO' per line,"
            " '#' starts a comment. Use '-' to read from stdin."
        ),
    )

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_arguments(argv)

    outputs_filepaths = get_outputs_file_paths(
        Path(args.outputs_folder) if args.outputs_folder else None,
        args.outputs_filename or "",
    )

    setup_logging(outputs_filepaths.log, args.debug)

    logger.info("Read edges from %s", args.edges)
    graph = _read_graph(args.edges, args.numeric)

    if debug():
        logger.debug(
            "Graph:\n%s",
            "\n".join(_make_readable_graph(graph)),
        )

    logger.info("Find circuits with %s components", args.scc)
    circuits = find_circuits(
        graph,
        args.min_length,
        args.max_length,
        get_decomposer(args.scc),
    )

    sys.stderr.write(f"Found {len(circuits)} circuits\n")
    _log_or_show_circuits(args.verbose, circuits)

    if args.graph:
        logger.info("Make graph")
        make_graph(outputs_filepaths.graph, circuits)

    return int(len(circuits) > args.threshold)


#   .--helper--------------------------------------------------------------.
#   |                    _          _                                      |
#   |                   | |__   ___| |_ __   ___ _ __                      |
#   |                   | '_ \ / _ \ | '_ \ / _ \ '__|                     |
#   |                   | | | |  __/ | |_) |  __/ |                        |
#   |                   |_| |_|\___|_| .__/ \___|_|                        |
#   |                                |_|                                   |
#   '----------------------------------------------------------------------'


def _read_graph(edges: str, numeric: bool) -> DirectedGraph:
    if edges == "-":
        return read_graph(sys.stdin, numeric)
    with Path(edges).open("r") as fp:
        return read_graph(fp, numeric)


def _make_readable_graph(graph: DirectedGraph) -> Iterator[str]:
    for vertex in graph:
        if neighbors := graph.neighbors(vertex):
            yield f"  {str(vertex)} -> {', '.join(str(n) for n in neighbors)}"


def _make_readable_circuits(circuits: Sequence[tuple]) -> Iterator[str]:
    for nr, circuit in enumerate(circuits, start=1):
        yield f"  Circuit {nr} ({len(circuit)}):"
        yield f"    {str(circuit[0])}"
        yield from (f"    > {str(v)}" for v in circuit[1:])


def _log_or_show_circuits(verbose: bool, circuits: Sequence[tuple]) -> None:
    if verbose:
        for line in _make_readable_circuits(circuits):
            sys.stdout.write(f"{line}\n")

    if debug():
        logger.debug(
            "Circuits:\n%s",
            "\n".join(_make_readable_circuits(circuits)),
        )
