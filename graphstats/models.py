from django.db import models


class AnalysisRun(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)

    source = models.CharField(max_length=512)  # ścieżka albo "<upload>"
    vertices = models.IntegerField()
    edges = models.IntegerField()
    sources = models.IntegerField()

    pairs = models.BigIntegerField()
    # NULL, gdy suma przekracza zakres bigint (2^63 - 1)
    total_distance = models.BigIntegerField(null=True, blank=True)

    # None = metryka niezdefiniowana (brak par / brak krawędzi)
    avg_path_len = models.FloatField(null=True, blank=True)
    diameter = models.IntegerField(null=True, blank=True)
    effective_diameter = models.FloatField(null=True, blank=True)
    distance_histogram = models.JSONField(default=list)

    workers = models.IntegerField(default=1)
    time_ms = models.IntegerField()

    def __str__(self):
        return f"{self.source} n={self.vertices} m={self.edges} t={self.time_ms}ms"
