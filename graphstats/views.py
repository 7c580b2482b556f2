from __future__ import annotations

import io
import json
import logging
from pathlib import Path

from django.conf import settings
from django.http import JsonResponse, HttpResponseBadRequest
from django.views.decorators.csrf import csrf_exempt

from .models import AnalysisRun
from .services.errors import GraphError
from .services.runner import run_analysis
from .services.runs import save_run

logger = logging.getLogger(__name__)


def _read_json(request):
    try:
        return json.loads(request.body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError):
        return None


def _resolve_data_path(raw: str) -> Path | None:
    """
    @brief Rozwiązuje ścieżkę z żądania względem GRAPHSTATS_DATA_DIR

    @return Ścieżka wewnątrz katalogu danych albo None, gdy z niego wychodzi
    """
    root = Path(settings.GRAPHSTATS_DATA_DIR).resolve()
    try:
        path = (root / raw).resolve()
    except (OSError, ValueError):
        return None
    if not path.is_relative_to(root):
        return None
    return path


def _run_to_json(run: AnalysisRun) -> dict:
    return {
        "id": run.id,
        "source": run.source,
        "vertices": run.vertices,
        "edges": run.edges,
        "sources": run.sources,
        "pairs": run.pairs,
        "total_distance": run.total_distance,
        "avg_path_len": run.avg_path_len,
        "diameter": run.diameter,
        "effective_diameter": run.effective_diameter,
        "distance_histogram": run.distance_histogram,
        "workers": run.workers,
        "time_ms": run.time_ms,
        "created_at": run.created_at.isoformat(),
    }


@csrf_exempt
def api_analyze(request):
    if request.method != "POST":
        return HttpResponseBadRequest("POST only")

    data = _read_json(request)
    if not isinstance(data, dict):
        return HttpResponseBadRequest("bad json")

    try:
        workers = int(data.get("workers", settings.GRAPHSTATS_WORKERS))
    except (TypeError, ValueError):
        return JsonResponse({"error": "workers must be int"}, status=400)
    if not 1 <= workers <= settings.GRAPHSTATS_MAX_WORKERS:
        return JsonResponse(
            {"error": f"workers must be between 1 and {settings.GRAPHSTATS_MAX_WORKERS}"},
            status=400,
        )

    # krawędzie w treści żądania mają pierwszeństwo przed ścieżką
    if isinstance(data.get("edges"), str):
        source = io.StringIO(data["edges"])
    elif isinstance(data.get("path"), str):
        source = _resolve_data_path(data["path"])
        if source is None:
            return JsonResponse({"error": "path outside data directory"}, status=400)
    else:
        return HttpResponseBadRequest("path or edges required")

    try:
        result = run_analysis(source, workers=workers)
    except GraphError as e:
        logger.warning("analysis failed: %s", e)
        return JsonResponse({"error": e.summary}, status=400)

    run = save_run(result)
    return JsonResponse(_run_to_json(run))


def api_runs(request):
    qs = AnalysisRun.objects.order_by("-created_at")[:300]
    return JsonResponse({"runs": [_run_to_json(r) for r in qs]})


def api_run_detail(request, run_id: int):
    try:
        run = AnalysisRun.objects.get(id=run_id)
    except AnalysisRun.DoesNotExist:
        return JsonResponse({"error": "run not found"}, status=404)

    return JsonResponse(_run_to_json(run))
