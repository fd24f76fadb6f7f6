from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Product",
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
                ("title", models.CharField(max_length=100)),
                (
                    "keywords",
                    models.CharField(
                        blank=True, default=None, max_length=200, null=True
                    ),
                ),
                (
                    "description",
                    models.TextField(blank=True, default=None, null=True),
                ),
                ("rating", models.IntegerField()),
                ("quantity_in_stock", models.IntegerField()),
                (
                    "dimensions",
                    models.CharField(
                        blank=True, default=None, max_length=50, null=True
                    ),
                ),
                ("price", models.DecimalField(decimal_places=10, max_digits=30)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("IN_STOCK", "In stock"),
                            ("OUT_OF_STOCK", "Out of stock"),
                            ("PREORDER", "Pre-order"),
                            ("DISCONTINUED", "Discontinued"),
                        ],
                        max_length=20,
                    ),
                ),
                (
                    "weight",
                    models.DecimalField(
                        blank=True,
                        decimal_places=10,
                        default=None,
                        max_digits=30,
                        null=True,
                    ),
                ),
                ("date_added", models.DateTimeField()),
                (
                    "date_modified",
                    models.DateTimeField(blank=True, default=None, null=True),
                ),
            ],
            options={
                "db_table": "products",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["status"], name="products_status_idx")
                ],
            },
        ),
    ]
