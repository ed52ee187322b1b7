import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Room",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("building_name", models.CharField(db_index=True, max_length=50)),
                ("room_number", models.CharField(max_length=20)),
                (
                    "seat_count",
                    models.PositiveIntegerField(
                        default=0,
                        validators=[django.core.validators.MinValueValidator(0)],
                    ),
                ),
            ],
            options={
                "verbose_name": "Room",
                "verbose_name_plural": "Rooms",
                "ordering": ["building_name", "room_number"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("building_name", "room_number"),
                        name="room_unique_number_per_building",
                    ),
                ],
            },
        ),
    ]
