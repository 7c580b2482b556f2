from __future__ import annotations

import logging
import os
import time

from .loader import graph_size, load_graph
from .metrics import path_metrics

logger = logging.getLogger(__name__)

UNDEFINED = "undefined"


def _source_name(source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    return "<upload>"


def run_analysis(source, workers: int = 1) -> dict:
    """
    @brief Wczytuje graf i oblicza jego metryki ścieżkowe

    Funkcja:
    - wczytuje listę krawędzi (ścieżka lub strumień),
    - wykonuje jeden przebieg BFS ze wszystkich źródeł (path_metrics),
    - mierzy czas wykonania.

    Zwracany słownik jest zgodny z wymaganiami:
    - komendy graphstats,
    - warstwy views.py i zapisu do bazy danych.

    @param source Ścieżka do pliku albo strumień tekstowy
    @param workers Liczba procesów dla przebiegu BFS
    @return Słownik z metrykami oraz source, vertices, edges, workers, time_ms
    @throws GraphLoadError, GraphParseError Przy błędach wczytywania
    """
    t0 = time.perf_counter()

    adj = load_graph(source)
    n, m = graph_size(adj)
    result = path_metrics(adj, workers=workers)

    result.update({
        "source": _source_name(source),
        "vertices": n,
        "edges": m,
        "workers": workers,
        "time_ms": int((time.perf_counter() - t0) * 1000),
    })

    logger.info("analysis of %s took %d ms", result["source"], result["time_ms"])
    return result


def format_value(value) -> str:
    return UNDEFINED if value is None else str(value)


def format_report(result: dict) -> str:
    """
    @brief Buduje dwuliniowy raport tekstowy z wyniku run_analysis

    Metryka niezdefiniowana (None) wypisywana jest jako "undefined".
    """
    return (
        f"The average distance between pairs of vertices is: {format_value(result['avg_path_len'])}\n"
        f"The diameter of the graph is: {format_value(result['diameter'])}"
    )
