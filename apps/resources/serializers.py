"""Serializers for the resource catalog."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .models import Resource


class ResourceSerializer(serializers.ModelSerializer):
    class Meta:
        model = Resource
        fields = ["id", "name", "type"]
        read_only_fields = fields
