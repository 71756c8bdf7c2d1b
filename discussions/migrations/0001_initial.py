import uuid

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
            name="Node",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("value", models.DecimalField(decimal_places=10, max_digits=20)),
                (
                    "operation",
                    models.CharField(
                        blank=True,
                        choices=[("add", "Add"), ("subtract", "Subtract"), ("multiply", "Multiply"), ("divide", "Divide")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("operand", models.DecimalField(blank=True, decimal_places=10, max_digits=20, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="nodes",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="derived_nodes",
                        to="discussions.node",
                    ),
                ),
            ],
            options={
                "db_table": "discussion_nodes",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["created_at"], name="node_created_at_idx")],
                "constraints": [
                    models.CheckConstraint(
                        condition=(
                            models.Q(("operand__isnull", True), ("operation__isnull", True), ("parent__isnull", True))
                            | models.Q(("operand__isnull", False), ("operation__isnull", False), ("parent__isnull", False))
                        ),
                        name="node_root_or_derived",
                    ),
                ],
            },
        ),
    ]
