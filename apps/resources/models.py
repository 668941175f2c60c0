"""Resource catalog models."""

from __future__ import annotations

from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore

from apps.bookings.domain.entities import Resource as ResourceEntity


class Resource(models.Model):
    """Shared resource that can be booked (room, equipment, studio)."""

    id = models.SlugField(max_length=64, primary_key=True)
    name = models.CharField(max_length=120)
    type = models.CharField(
        max_length=60,
        help_text=_("Resource category, e.g. Meeting Room or Equipment."),
    )

    class Meta:
        verbose_name = _("Resource")
        verbose_name_plural = _("Resources")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def to_domain(self) -> ResourceEntity:
        return ResourceEntity(id=self.id, name=self.name, type=self.type)
