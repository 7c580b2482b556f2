from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AnalysisRun",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("source", models.CharField(max_length=512)),
                ("vertices", models.IntegerField()),
                ("edges", models.IntegerField()),
                ("sources", models.IntegerField()),
                ("pairs", models.BigIntegerField()),
                ("total_distance", models.BigIntegerField(blank=True, null=True)),
                ("avg_path_len", models.FloatField(blank=True, null=True)),
                ("diameter", models.IntegerField(blank=True, null=True)),
                ("effective_diameter", models.FloatField(blank=True, null=True)),
                ("distance_histogram", models.JSONField(default=list)),
                ("workers", models.IntegerField(default=1)),
                ("time_ms", models.IntegerField()),
            ],
        ),
    ]
