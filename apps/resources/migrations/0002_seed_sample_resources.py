from django.db import migrations

from apps.resources.catalog import SAMPLE_RESOURCES


def seed_sample_resources(apps, schema_editor):
    Resource = apps.get_model("resources", "Resource")

    for resource in SAMPLE_RESOURCES:
        Resource.objects.update_or_create(
            id=resource.id,
            defaults={"name": resource.name, "type": resource.type},
        )


def remove_sample_resources(apps, schema_editor):
    Resource = apps.get_model("resources", "Resource")
    Resource.objects.filter(id__in=[r.id for r in SAMPLE_RESOURCES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("resources", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_sample_resources, remove_sample_resources),
    ]
