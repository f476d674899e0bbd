import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CardBucket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("card_key", models.CharField(editable=False, max_length=64, unique=True)),
                ("front", models.TextField()),
                ("back", models.TextField()),
                ("hint", models.TextField(blank=True, default="")),
                ("tags", models.JSONField(blank=True, default=list)),
                ("bucket", models.PositiveIntegerField(default=0)),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "indexes": [models.Index(fields=["bucket"], name="cardbucket_bucket_idx")],
            },
        ),
        migrations.CreateModel(
            name="PracticeLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("card_key", models.CharField(editable=False, max_length=64)),
                ("front", models.TextField()),
                ("back", models.TextField()),
                ("day", models.PositiveIntegerField()),
                ("difficulty", models.SmallIntegerField()),
                ("previous_bucket", models.PositiveIntegerField()),
                ("new_bucket", models.PositiveIntegerField()),
                ("created_at", models.DateTimeField(default=django.utils.timezone.now)),
            ],
            options={
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["card_key", "created_at"], name="practicelog_card_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="StudyClock",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("day", models.PositiveIntegerField(default=0)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
    ]
