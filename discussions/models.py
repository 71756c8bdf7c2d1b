import uuid

from django.conf import settings
from django.db import models
from django.db.models import Q


class Operation(models.TextChoices):
    ADD = "add", "Add"
    SUBTRACT = "subtract", "Subtract"
    MULTIPLY = "multiply", "Multiply"
    DIVIDE = "divide", "Divide"


class Node(models.Model):
    """
    One value in a number tree.

    A root carries only its starting value. Every other node was derived from
    its parent's value by applying ``operation`` with ``operand``. Nodes are
    written once and never updated or deleted.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    value = models.DecimalField(max_digits=20, decimal_places=10)
    operation = models.CharField(max_length=16, choices=Operation.choices, null=True, blank=True)
    operand = models.DecimalField(max_digits=20, decimal_places=10, null=True, blank=True)
    parent = models.ForeignKey("self", on_delete=models.PROTECT, null=True, blank=True, related_name="derived_nodes")
    author = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="nodes")
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "discussion_nodes"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["created_at"], name="node_created_at_idx"),
        ]
        constraints = [
            # roots have no operation, operand or parent; derived nodes have all three
            models.CheckConstraint(
                condition=(
                    Q(parent__isnull=True, operation__isnull=True, operand__isnull=True)
                    | Q(parent__isnull=False, operation__isnull=False, operand__isnull=False)
                ),
                name="node_root_or_derived",
            ),
        ]

    def __str__(self) -> str:
        if self.operation is None:
            return f"{self.value} (root)"
        return f"{self.value} ({self.operation} {self.operand})"
