#!/usr/bin/env python3

import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .graph import DirectedGraph
from .type_defs import T


def parse_edges(lines: Iterable[str], make_vertex: Callable[[str], T]) -> Iterator[tuple[T, T]]:
    # One edge per line: FROM TO
    # Empty lines and everything after '#' are ignored
    for nr, line in enumerate(lines, start=1):
        if not (content := line.split("#", 1)[0].strip()):
            continue
        if len(parts := content.split()) != 2:
            raise ValueError(f"Line {nr}: expected 'FROM TO', got {line.rstrip()!r}")
        try:
            edge = make_vertex(parts[0]), make_vertex(parts[1])
        except ValueError as e:
            raise ValueError(f"Line {nr}: invalid vertex in {line.rstrip()!r}: {e}") from e
        yield edge


def read_graph(fp: TextIO, numeric: bool) -> DirectedGraph:
    if numeric:
        return DirectedGraph.from_edges(parse_edges(fp, int))
    return DirectedGraph.from_edges(parse_edges(fp, str))


@dataclass(frozen=True, kw_only=True)
class OutputsFilePaths:
    log: Path
    graph: Path


def get_outputs_file_paths(outputs_folder: Path | None, outputs_filename: str) -> OutputsFilePaths:
    if not outputs_folder:
        outputs_folder = Path.home() / Path(".local", "py-elementary-circuits", "outputs")
    outputs_folder.mkdir(parents=True, exist_ok=True)
    if not outputs_filename:
        outputs_filename = str(int(time.time()))
    return OutputsFilePaths(
        log=(outputs_folder / outputs_filename).with_suffix(".log"),
        graph=(outputs_folder / outputs_filename).with_suffix(".gv"),
    )
