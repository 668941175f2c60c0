"""Tests for the resource catalog API and lookup."""

from __future__ import annotations

import pytest
from django.db import DatabaseError
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.domain.errors import StoreError
from apps.resources.catalog import SAMPLE_RESOURCES
from apps.resources.models import Resource
from apps.resources.services import DjangoResourceLookup


class ResourceAPITests(APITestCase):
    def test_sample_catalog_is_seeded(self) -> None:
        response = self.client.get(reverse("resource-list"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            sorted(r["id"] for r in response.data),
            sorted(r.id for r in SAMPLE_RESOURCES),
        )

    def test_filter_by_type(self) -> None:
        response = self.client.get(reverse("resource-list"), {"type": "equipment"})

        self.assertEqual(
            sorted(r["name"] for r in response.data),
            ["Laptop Cart", "Projector #1"],
        )

    def test_retrieve_resource(self) -> None:
        response = self.client.get(reverse("resource-detail", args=["video-studio"]))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data, {"id": "video-studio", "name": "Video Studio", "type": "Studio"})

    def test_catalog_is_read_only(self) -> None:
        response = self.client.post(
            reverse("resource-list"),
            {"id": "new-room", "name": "New Room", "type": "Meeting Room"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)


@pytest.mark.django_db
def test_lookup_reads_catalog_table():
    Resource.objects.create(id="boardroom", name="Boardroom", type="Meeting Room")
    lookup = DjangoResourceLookup()

    assert lookup.exists("boardroom")
    assert not lookup.exists("missing")
    assert not lookup.exists("")
    assert lookup.get("boardroom").name == "Boardroom"
    assert lookup.get("missing") is None


class UnreadableTable:
    def filter(self, **kwargs):
        raise DatabaseError("no such table: resources_resource")


@pytest.mark.parametrize("method", ["exists", "get"])
def test_lookup_raises_store_error_when_catalog_is_unreadable(monkeypatch, method):
    lookup = DjangoResourceLookup()
    monkeypatch.setattr(lookup, "_queryset", lambda: UnreadableTable())

    with pytest.raises(StoreError) as excinfo:
        getattr(lookup, method)("conf-room-a")

    assert "no such table" in excinfo.value.message
    assert not excinfo.value.conflict
    assert isinstance(excinfo.value.__cause__, DatabaseError)
