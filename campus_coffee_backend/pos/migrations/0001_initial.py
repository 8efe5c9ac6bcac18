"""
======================================================
PATH: pos/migrations/0001_initial.py
======================================================
MIGRATION: CREATE PointOfSale
"""

from __future__ import annotations

from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PointOfSale",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("name", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("CAFE", "Café"),
                            ("VENDING_MACHINE", "Vending machine"),
                            ("BAKERY", "Bakery"),
                            ("CAFETERIA", "Cafeteria"),
                        ],
                        default="CAFE",
                        max_length=32,
                    ),
                ),
                (
                    "campus",
                    models.CharField(
                        choices=[
                            ("ALTSTADT", "Altstadt"),
                            ("BERGHEIM", "Bergheim"),
                            ("INF", "Im Neuenheimer Feld"),
                            ("NEUENHEIM", "Neuenheim"),
                        ],
                        db_index=True,
                        max_length=32,
                    ),
                ),
                ("street", models.CharField(blank=True, default="", max_length=255)),
                (
                    "house_number",
                    models.CharField(blank=True, default="", max_length=32),
                ),
                (
                    "postal_code",
                    models.CharField(blank=True, default="", max_length=16),
                ),
                ("city", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "point of sale",
                "verbose_name_plural": "points of sale",
                "db_table": "pos",
                "ordering": ["id"],
            },
        ),
    ]
