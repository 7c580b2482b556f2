from __future__ import annotations

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from graphstats.services.errors import GraphError
from graphstats.services.runner import format_report, run_analysis
from graphstats.services.runs import save_run


class Command(BaseCommand):
    help = "Compute the average shortest-path length and the diameter of a directed edge-list graph."

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            nargs="?",
            default=None,
            help="edge-list file (default: GRAPHSTATS_INPUT_PATH setting)",
        )
        parser.add_argument(
            "--workers",
            type=int,
            default=None,
            help="number of BFS worker processes (default: GRAPHSTATS_WORKERS setting)",
        )
        parser.add_argument("--json", action="store_true", help="print the full result as JSON")
        parser.add_argument("--save", action="store_true", help="store the result as an AnalysisRun")

    def handle(self, *args, **options):
        path = options["path"] or settings.GRAPHSTATS_INPUT_PATH
        workers = options["workers"]
        if workers is None:
            workers = settings.GRAPHSTATS_WORKERS
        if workers < 1:
            raise CommandError("--workers must be >= 1")

        try:
            result = run_analysis(path, workers=workers)
        except GraphError as e:
            raise CommandError(str(e)) from e

        if options["save"]:
            run = save_run(result)
            result["run_id"] = run.id

        if options["json"]:
            self.stdout.write(json.dumps(result, indent=2))
        else:
            self.stdout.write(format_report(result))
