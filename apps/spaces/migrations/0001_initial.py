import decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Space",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, unique=True)),
                ("description", models.TextField(blank=True)),
                (
                    "capacity",
                    models.PositiveIntegerField(
                        help_text="Number of bookable desks, numbered from 1.",
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                ("conveniences", models.JSONField(blank=True, default=list)),
                (
                    "daily_rate",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("0.00"),
                        help_text="Price of one desk for one open day.",
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(decimal.Decimal("0.00"))],
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="spaces",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Space",
                "verbose_name_plural": "Spaces",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="SpaceAddress",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("street", models.CharField(max_length=255)),
                ("city", models.CharField(max_length=100)),
                ("postal_code", models.CharField(blank=True, max_length=20)),
                ("country", models.CharField(blank=True, max_length=100)),
                (
                    "space",
                    models.OneToOneField(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="address",
                        to="spaces.space",
                    ),
                ),
            ],
            options={
                "verbose_name": "Space address",
                "verbose_name_plural": "Space addresses",
            },
        ),
        migrations.CreateModel(
            name="SpaceAvailability",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "day_of_week",
                    models.PositiveSmallIntegerField(
                        help_text="1 = Monday .. 7 = Sunday.",
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(7),
                        ],
                    ),
                ),
                ("is_open", models.BooleanField(default=False)),
                ("open_from", models.TimeField(blank=True, null=True)),
                ("open_to", models.TimeField(blank=True, null=True)),
                (
                    "space",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="availabilities",
                        to="spaces.space",
                    ),
                ),
            ],
            options={
                "verbose_name": "Availability",
                "verbose_name_plural": "Availabilities",
                "ordering": ["day_of_week", "id"],
            },
        ),
        migrations.CreateModel(
            name="SpaceImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("image", models.ImageField(upload_to="spaces/images/")),
                ("caption", models.CharField(max_length=255)),
                ("uploaded_at", models.DateTimeField(auto_now_add=True)),
                (
                    "space",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="images",
                        to="spaces.space",
                    ),
                ),
            ],
            options={
                "verbose_name": "Space image",
                "verbose_name_plural": "Space images",
                "ordering": ["uploaded_at", "id"],
            },
        ),
        migrations.AddConstraint(
            model_name="spaceavailability",
            constraint=models.UniqueConstraint(
                fields=("space", "day_of_week"),
                name="space_availability_unique_day",
            ),
        ),
        migrations.AddConstraint(
            model_name="spaceavailability",
            constraint=models.CheckConstraint(
                condition=models.Q(("day_of_week__gte", 1), ("day_of_week__lte", 7)),
                name="space_availability_valid_day",
            ),
        ),
    ]
