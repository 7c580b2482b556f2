from __future__ import annotations

import logging

from graphstats.models import AnalysisRun

logger = logging.getLogger(__name__)

# zakres kolumny BigIntegerField (bigint ze znakiem)
BIGINT_MAX = 2**63 - 1


def save_run(result: dict) -> AnalysisRun:
    """
    @brief Zapisuje wynik run_analysis jako obiekt AnalysisRun

    Suma odległości w wyniku jest liczbą całkowitą dowolnej precyzji.
    Kolumna total_distance mieści wartości do 2^63 - 1; większa suma
    zapisywana jest jako NULL (pełna wartość zostaje w wyniku i logu).

    @param result Słownik zwrócony przez run_analysis
    @return Utworzony obiekt AnalysisRun
    """
    total = result["total_distance"]
    if total > BIGINT_MAX:
        logger.warning("total_distance %d exceeds bigint range, stored as NULL", total)
        total = None

    return AnalysisRun.objects.create(
        source=result["source"],
        vertices=result["vertices"],
        edges=result["edges"],
        sources=result["sources"],
        pairs=result["pairs"],
        total_distance=total,
        avg_path_len=result["avg_path_len"],
        diameter=result["diameter"],
        effective_diameter=result["effective_diameter"],
        distance_histogram=result["distance_histogram"],
        workers=result["workers"],
        time_ms=result["time_ms"],
    )
