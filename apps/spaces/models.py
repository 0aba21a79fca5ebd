"""Space persistence models.

Owned records (address, availability, images) reference their space
through a nullable foreign key with ``PROTECT``: they are created
detached, attached when the space is saved, and must be deleted
explicitly before the space itself can go.
"""

from __future__ import annotations

from decimal import Decimal

from django.conf import settings  # type: ignore
from django.core.validators import MaxValueValidator, MinValueValidator  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class Space(models.Model):
    """Coworking space with bookable desks."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="spaces",
    )
    name = models.CharField(max_length=255, unique=True)
    description = models.TextField(blank=True)
    capacity = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
        help_text=_("Number of bookable desks, numbered from 1."),
    )
    conveniences = models.JSONField(default=list, blank=True)
    daily_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text=_("Price of one desk for one open day."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = _("Space")
        verbose_name_plural = _("Spaces")
        ordering = ["id"]

    def __str__(self) -> str:
        return self.name


class SpaceAddress(models.Model):
    space = models.OneToOneField(
        Space,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="address",
    )
    street = models.CharField(max_length=255)
    city = models.CharField(max_length=100)
    postal_code = models.CharField(max_length=20, blank=True)
    country = models.CharField(max_length=100, blank=True)

    class Meta:
        verbose_name = _("Space address")
        verbose_name_plural = _("Space addresses")

    def __str__(self) -> str:
        return f"{self.street}, {self.city}"


class SpaceAvailability(models.Model):
    """Open/closed flag of a space for one ISO weekday."""

    space = models.ForeignKey(
        Space,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="availabilities",
    )
    day_of_week = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(7)],
        help_text=_("1 = Monday .. 7 = Sunday."),
    )
    is_open = models.BooleanField(default=False)
    open_from = models.TimeField(null=True, blank=True)
    open_to = models.TimeField(null=True, blank=True)

    class Meta:
        verbose_name = _("Availability")
        verbose_name_plural = _("Availabilities")
        ordering = ["day_of_week", "id"]
        constraints = [
            models.UniqueConstraint(
                fields=["space", "day_of_week"],
                name="space_availability_unique_day",
            ),
            models.CheckConstraint(
                condition=models.Q(day_of_week__gte=1) & models.Q(day_of_week__lte=7),
                name="space_availability_valid_day",
            ),
        ]

    def __str__(self) -> str:
        state = "open" if self.is_open else "closed"
        return f"{self.space_id} day {self.day_of_week}: {state}"


class SpaceImage(models.Model):
    space = models.ForeignKey(
        Space,
        on_delete=models.PROTECT,
        null=True,
        blank=True,
        related_name="images",
    )
    image = models.ImageField(upload_to="spaces/images/")
    caption = models.CharField(max_length=255)
    uploaded_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        verbose_name = _("Space image")
        verbose_name_plural = _("Space images")
        ordering = ["uploaded_at", "id"]

    def __str__(self) -> str:
        return self.caption
