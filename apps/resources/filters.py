"""FilterSet definitions for the resource catalog listing."""

from __future__ import annotations

import django_filters  # type: ignore

from .models import Resource


class ResourceFilterSet(django_filters.FilterSet):
    """Filter resources by category or a name fragment."""

    type = django_filters.CharFilter(field_name="type", lookup_expr="iexact")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")

    class Meta:
        model = Resource
        fields = ["type", "name"]
