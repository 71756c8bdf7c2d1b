import uuid
from decimal import Decimal

import pytest

from discussions.exceptions import InvalidOperation
from discussions.models import Operation
from discussions.tree import build_forest, calculate_result, to_storage_value


@pytest.mark.parametrize(
    "operation, expected",
    [
        (Operation.ADD, Decimal("15")),
        (Operation.SUBTRACT, Decimal("5")),
        (Operation.MULTIPLY, Decimal("50")),
        (Operation.DIVIDE, Decimal("2")),
    ],
)
def test_calculate_result(operation, expected):
    assert calculate_result(Decimal("10"), operation, Decimal("5")) == expected


def test_calculate_result_accepts_plain_strings():
    assert calculate_result(Decimal("2.5"), "multiply", Decimal("4")) == Decimal("10.0")


@pytest.mark.parametrize("parent_value", [Decimal("10"), Decimal("0"), Decimal("-3.25"), Decimal("9999999999")])
def test_divide_by_zero_is_rejected(parent_value):
    with pytest.raises(InvalidOperation) as exc:
        calculate_result(parent_value, Operation.DIVIDE, Decimal("0"))
    assert str(exc.value.detail) == "Division by zero is not allowed"


def test_divide_by_zero_with_scaled_zero():
    with pytest.raises(InvalidOperation):
        calculate_result(Decimal("10"), Operation.DIVIDE, Decimal("0.0000000000"))


def test_unknown_operation_is_rejected():
    with pytest.raises(InvalidOperation) as exc:
        calculate_result(Decimal("10"), "power", Decimal("2"))
    assert str(exc.value.detail) == "Invalid operation"


def test_to_storage_value_rounds_to_ten_places():
    assert to_storage_value(Decimal("10") / Decimal("3")) == Decimal("3.3333333333")


def test_to_storage_value_rejects_values_the_column_cannot_hold():
    with pytest.raises(InvalidOperation):
        to_storage_value(Decimal("1000000000"))
    with pytest.raises(InvalidOperation):
        to_storage_value(Decimal("-1000000000"))
    with pytest.raises(InvalidOperation):
        to_storage_value(Decimal("9999999999.9999999999"))


def test_to_storage_value_accepts_largest_value():
    assert to_storage_value(Decimal("-999999999.9999999999")) == Decimal("-999999999.9999999999")


def test_to_storage_value_drops_sign_of_zero():
    value = to_storage_value(calculate_result(Decimal("0"), Operation.MULTIPLY, Decimal("-1")))

    assert value == 0
    assert not value.is_signed()


def node(node_id, parent_id=None, value="1"):
    return {"id": node_id, "parent_id": parent_id, "value": value}


def test_build_forest_empty():
    assert build_forest([]) == []


def test_build_forest_chain():
    forest = build_forest([node("a"), node("b", "a"), node("c", "b")])

    assert len(forest) == 1
    root = forest[0]
    assert root["id"] == "a"
    assert [child["id"] for child in root["children"]] == ["b"]
    b = root["children"][0]
    assert [child["id"] for child in b["children"]] == ["c"]
    assert b["children"][0]["children"] == []


def test_build_forest_child_listed_before_parent():
    # newest-first input puts descendants ahead of their ancestors
    forest = build_forest([node("c", "b"), node("b", "a"), node("a")])

    assert [root["id"] for root in forest] == ["a"]
    assert forest[0]["children"][0]["children"][0]["id"] == "c"


def test_build_forest_two_unrelated_roots():
    forest = build_forest([node("x"), node("y")])

    assert [root["id"] for root in forest] == ["x", "y"]
    assert all(root["children"] == [] for root in forest)


def test_build_forest_keeps_input_order_for_children():
    forest = build_forest([node("r"), node("c2", "r"), node("c1", "r"), node("c3", "r")])

    assert [child["id"] for child in forest[0]["children"]] == ["c2", "c1", "c3"]


def test_build_forest_drops_node_with_dangling_parent():
    forest = build_forest([node("a"), node("orphan", "missing"), node("b", "a")])

    assert [root["id"] for root in forest] == ["a"]
    assert [child["id"] for child in forest[0]["children"]] == ["b"]


def test_build_forest_drops_subtree_under_dangling_parent():
    forest = build_forest([node("orphan", "missing"), node("grandchild", "orphan")])

    assert forest == []


def test_build_forest_matches_uuid_and_string_ids():
    root_id = uuid.uuid4()
    forest = build_forest([node(root_id), node("child", str(root_id))])

    assert forest[0]["children"][0]["id"] == "child"


def test_build_forest_does_not_mutate_input():
    nodes = [node("a"), node("b", "a")]
    build_forest(nodes)

    assert all("children" not in n for n in nodes)
