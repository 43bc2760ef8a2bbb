"""Membership Enforcement - tests for the pure item <-> warehouse rules.

Tests cover:
    - check_item_assignable distinguishes "this warehouse" from "another warehouse"
    - check_item_removable rejects unassigned and foreign items
    - check_listed / check_not_listed report InconsistencyError
    - with_member / without_member keep the order of other ids
    - check_free_for_new_warehouse and check_warehouse_unchanged
"""

from warehouser.core.enforce_membership import (
    check_free_for_new_warehouse,
    check_item_assignable,
    check_item_removable,
    check_listed,
    check_not_listed,
    check_warehouse_unchanged,
    with_member,
    without_member,
)
from warehouser.core.errors import ErrorKind
from warehouser.schemas.inventory import Warehouse
from tests.factories import make_item


# --- check_item_assignable ----------------------------------------------------

def test_unassigned_item_is_assignable():
    assert check_item_assignable(make_item(5), 3) is None


def test_item_already_in_same_warehouse_is_conflict():
    error = check_item_assignable(make_item(5, warehouse=3), 3)
    assert error is not None
    assert error.kind == ErrorKind.CONFLICT
    assert "Item id 5 already belongs to warehouse id 3" in error.message


def test_item_in_other_warehouse_names_the_owner():
    error = check_item_assignable(make_item(5, warehouse=7), 3)
    assert error.kind == ErrorKind.CONFLICT
    assert "item id 5" in error.message
    assert "warehouse id 3" in error.message
    assert "already belongs to warehouse id 7" in error.message


def test_assign_conflict_carries_ids_in_context():
    error = check_item_assignable(make_item(5, warehouse=7), 3)
    assert error.context.item_id == 5
    assert error.context.warehouse_id == 3


# --- check_item_removable -----------------------------------------------------

def test_item_in_warehouse_is_removable():
    assert check_item_removable(make_item(5, warehouse=3), 3) is None


def test_unassigned_item_is_not_removable():
    error = check_item_removable(make_item(5), 3)
    assert error.kind == ErrorKind.CONFLICT
    assert "Item id 5 does not belong to any warehouse" in error.message


def test_item_in_other_warehouse_is_not_removable():
    error = check_item_removable(make_item(5, warehouse=8), 3)
    assert error.kind == ErrorKind.CONFLICT
    assert "does not belong to warehouse id 3" in error.message
    assert "belongs to warehouse id 8" in error.message


# --- listed / not listed ------------------------------------------------------

def test_check_not_listed_passes_for_absent_item():
    assert check_not_listed(Warehouse(id=1, items=[2, 3]), 4) is None


def test_check_not_listed_reports_inconsistency():
    error = check_not_listed(Warehouse(id=1, items=[2, 3]), 3)
    assert error.kind == ErrorKind.INCONSISTENCY
    assert "Item id 3" in error.message
    assert "warehouse id 1" in error.message
    assert error.message.startswith("INCONSISTENCY IN DATABASE")


def test_check_listed_passes_for_member():
    assert check_listed(Warehouse(id=1, items=[2, 3]), 2) is None


def test_check_listed_reports_inconsistency():
    error = check_listed(Warehouse(id=1, items=[2]), 9)
    assert error.kind == ErrorKind.INCONSISTENCY
    assert "Item id 9 claims it belongs to warehouse id 1" in error.message


# --- with_member / without_member ---------------------------------------------

def test_with_member_appends_at_end():
    original = Warehouse(id=1, items=[4, 2])
    updated = with_member(original, 9)
    assert updated.items == [4, 2, 9]
    assert original.items == [4, 2]


def test_without_member_preserves_order_of_others():
    updated = without_member(Warehouse(id=1, items=[4, 2, 9, 7]), 9)
    assert updated.items == [4, 2, 7]


def test_assign_then_remove_restores_list():
    original = Warehouse(id=1, items=[4, 2])
    assert without_member(with_member(original, 5), 5).items == original.items


# --- create / update ----------------------------------------------------------

def test_free_item_may_start_new_warehouse():
    assert check_free_for_new_warehouse(make_item(5)) is None


def test_assigned_item_may_not_start_new_warehouse():
    error = check_free_for_new_warehouse(make_item(5, warehouse=2))
    assert error.kind == ErrorKind.CONFLICT
    assert "item id 5 already belongs to warehouse id 2" in error.message


def test_update_with_same_warehouse_is_allowed():
    existing = make_item(5, warehouse=2)
    updated = make_item(5, warehouse=2, weight=99)
    assert check_warehouse_unchanged(updated, existing) is None


def test_update_changing_warehouse_is_conflict():
    error = check_warehouse_unchanged(make_item(5, warehouse=None), make_item(5, warehouse=2))
    assert error.kind == ErrorKind.CONFLICT
    assert "item id 5" in error.message
