from typing import List, Optional

from .models import Node


class NodeStore:
    """ORM-backed node collection. Nodes are only ever inserted and read."""

    def insert(self, **attrs) -> Node:
        return Node.objects.create(**attrs)

    def find_by_id(self, node_id) -> Optional[Node]:
        return Node.objects.filter(pk=node_id).first()

    def list_all(self) -> List[Node]:
        """All nodes, most recent first."""
        return list(Node.objects.select_related("author").order_by("-created_at"))
