"""
Discussion service: creating roots, deriving child nodes and reading the forest.
"""
import logging
from decimal import Decimal
from typing import List

from .exceptions import InvalidOperation, ParentNotFound
from .models import Node
from .serializers import NodeSerializer
from .tree import build_forest, calculate_result, to_storage_value

logger = logging.getLogger(__name__)


class DiscussionService:
    def __init__(self, store):
        self.store = store

    def create_root(self, author_id, starting_value: Decimal) -> Node:
        """Start a new tree whose root holds ``starting_value``."""
        node = self.store.insert(
            value=to_storage_value(starting_value),
            operation=None,
            operand=None,
            parent_id=None,
            author_id=author_id,
        )
        logger.info(f"User {author_id} started tree {node.id} at {node.value}")
        return node

    def create_child(self, author_id, parent_id, operation: str, operand: Decimal) -> Node:
        """
        Derive a new node from an existing one.

        Raises:
            ParentNotFound: if ``parent_id`` does not name an existing node.
            InvalidOperation: on division by zero, an unknown operation or a
                result the store cannot hold.
        """
        parent = self.store.find_by_id(parent_id)
        if parent is None:
            logger.warning(f"User {author_id} tried to extend missing node {parent_id}")
            raise ParentNotFound()

        try:
            result = to_storage_value(calculate_result(parent.value, operation, operand))
        except InvalidOperation as e:
            logger.warning(f"Rejected {operation} {operand} on node {parent.id}: {e.detail}")
            raise

        node = self.store.insert(
            value=result,
            operation=operation,
            operand=operand,
            parent_id=parent.id,
            author_id=author_id,
        )
        logger.info(f"User {author_id} added node {node.id} = {parent.value} {operation} {operand}")
        return node

    def list_forest(self) -> List[dict]:
        """Every tree, each root carrying its nested ``children``."""
        nodes = self.store.list_all()
        return build_forest(NodeSerializer(nodes, many=True).data)
