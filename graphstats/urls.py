from django.contrib import admin
from django.urls import path
from graphstats import views

urlpatterns = [
    path("admin/", admin.site.urls),

    path("api/analyze", views.api_analyze),

    path("api/runs", views.api_runs),
    path("api/runs/<int:run_id>", views.api_run_detail),
]
