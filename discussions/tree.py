"""
Tree engine: value derivation and forest reconstruction.

Nothing in here touches the database. ``calculate_result`` works on
Decimals; ``build_forest`` works on already-serialized node mappings.
"""
import logging
from decimal import Decimal
from typing import Iterable, List, Mapping

from .exceptions import InvalidOperation
from .models import Operation

logger = logging.getLogger(__name__)

# Node.value is stored with 10 fractional digits. SQLite keeps decimals as
# floats and reads them back rounded to 15 significant digits, so one integer
# digit of the 20-digit column is left free: anything below 1e9 reads back
# within the column on every backend.
VALUE_PLACES = Decimal("1E-10")
VALUE_LIMIT = Decimal("1E9")
VALUE_MAX_DIGITS = 19


def calculate_result(left: Decimal, operation: str, right: Decimal) -> Decimal:
    """
    Apply ``operation`` to a parent value and an operand.

    Raises:
        InvalidOperation: on division by zero or an unknown operation.
    """
    if operation == Operation.ADD:
        return left + right
    if operation == Operation.SUBTRACT:
        return left - right
    if operation == Operation.MULTIPLY:
        return left * right
    if operation == Operation.DIVIDE:
        if right == 0:
            raise InvalidOperation("Division by zero is not allowed")
        return left / right

    raise InvalidOperation("Invalid operation")


def to_storage_value(value: Decimal) -> Decimal:
    """Round ``value`` to the stored scale, rejecting what the column cannot hold."""
    if abs(value) >= VALUE_LIMIT:
        raise InvalidOperation("Result is out of the supported range")
    value = value.quantize(VALUE_PLACES)
    if value.is_zero():
        return value.copy_abs()
    return value


def build_forest(nodes: Iterable[Mapping]) -> List[dict]:
    """
    Rebuild the forest from a flat, unordered list of nodes.

    Each node must expose ``id`` and ``parent_id``. Every node comes back as a
    copy carrying a ``children`` list; only roots are returned at the top
    level. Children keep the order they had in the input.

    A node whose parent is not in the input is left out of the result.
    """
    nodes = list(nodes)

    # every node gets its children list before any linking, since a child
    # may show up ahead of its parent
    lookup = {}
    for node in nodes:
        lookup[str(node["id"])] = {**node, "children": []}

    roots = []
    for node in nodes:
        current = lookup[str(node["id"])]
        parent_id = node.get("parent_id")

        if parent_id is None:
            roots.append(current)
            continue

        parent = lookup.get(str(parent_id))
        if parent is None:
            logger.warning(f"Dropping node {node['id']} from forest: parent {parent_id} not found")
            continue
        parent["children"].append(current)

    return roots
