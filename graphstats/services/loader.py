from __future__ import annotations

import logging
import os
from typing import Iterable

from .errors import GraphLoadError, GraphParseError

logger = logging.getLogger(__name__)


def _parse_node(token: str, lineno: int, line: str) -> int:
    # tylko cyfry ASCII z opcjonalnym "+", bez "_" i cyfr spoza ASCII
    digits = token[1:] if token[:1] in "+-" else token
    if not (digits.isascii() and digits.isdigit()):
        raise GraphParseError(lineno, line, "invalid node id")

    if token.startswith("-"):
        raise GraphParseError(lineno, line, "negative node id")

    return int(digits)


def parse_edges(lines: Iterable[str]) -> dict[int, list[int]]:
    """
    @brief Buduje listę sąsiedztwa grafu skierowanego z linii listy krawędzi

    Każda linia niebędąca komentarzem (znak '#' na początku), również pusta,
    musi zawierać identyfikator źródła i celu krawędzi. Dalsze tokeny
    są ignorowane. Multikrawędzie i pętle są zachowywane.

    Kluczami słownika są wyłącznie wierzchołki, z których wychodzi
    co najmniej jedna krawędź, w kolejności pierwszego wystąpienia.

    @param lines Iterowalny zbiór linii tekstu
    @return Słownik wierzchołek -> lista sąsiadów wyjściowych
    @throws GraphParseError Przy pierwszej błędnej linii
    """
    adj: dict[int, list[int]] = {}

    for lineno, line in enumerate(lines, start=1):
        if line.startswith("#"):
            continue

        parts = line.split()
        if len(parts) < 2:
            raise GraphParseError(lineno, line, "expected source and destination")

        u = _parse_node(parts[0], lineno, line)
        v = _parse_node(parts[1], lineno, line)
        adj.setdefault(u, []).append(v)

    return adj


def load_graph(source) -> dict[int, list[int]]:
    """
    @brief Wczytuje graf skierowany z pliku lub strumienia tekstowego

    @param source Ścieżka (str / PathLike) albo otwarty strumień tekstowy
    @return Lista sąsiedztwa (patrz parse_edges)
    @throws GraphLoadError Gdy pliku nie da się otworzyć lub odczytać
    @throws GraphParseError Gdy linia ma niepoprawny format
    """
    if isinstance(source, (str, os.PathLike)):
        path = os.fspath(source)
        try:
            with open(path, encoding="utf-8") as f:
                adj = parse_edges(f)
        except (OSError, UnicodeDecodeError) as e:
            raise GraphLoadError(f"cannot read {path}: {e}") from e
        name = path
    else:
        adj = parse_edges(source)
        name = "<stream>"

    n, m = graph_size(adj)
    logger.info("loaded %s: %d vertices, %d edges, %d sources", name, n, m, len(adj))
    return adj


def graph_size(adj: dict[int, list[int]]) -> tuple[int, int]:
    """
    @brief Zwraca (liczba wierzchołków, liczba krawędzi)

    Wierzchołki liczone są łącznie ze zlewami, które nie są kluczami słownika.
    """
    nodes = set(adj)
    m = 0
    for nbrs in adj.values():
        nodes.update(nbrs)
        m += len(nbrs)
    return len(nodes), m
