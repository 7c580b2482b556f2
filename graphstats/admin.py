from django.contrib import admin
from graphstats.models import AnalysisRun

@admin.register(AnalysisRun)
class AnalysisRunAdmin(admin.ModelAdmin):
    list_display = ("created_at", "source", "vertices", "edges", "avg_path_len", "diameter", "time_ms")
    list_filter = ("workers",)
    search_fields = ("source",)
