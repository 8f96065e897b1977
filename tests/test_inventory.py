import pytest

from askit.inventory import Inventory, Item, ShareItem, UniqueItem


def test_item_defaults_to_single_stack():
    item = Item("mushroom")
    assert item.stack_max == 1
    assert item.texture is None


def test_source_example_overfull_slot_takes_everything():
    share = ShareItem(8)
    share.put(0, 1, 5)
    share.put(1, 2, 95)
    rest = share.add(2, 25, 5)
    assert rest == UniqueItem(2, 0)
    assert share[1] == UniqueItem(2, 95 + 25)
    assert share[0] == UniqueItem(1, 5)


def test_add_conserves_total_and_respects_maximum():
    share = ShareItem(3)
    rest = share.add(1, 12, 5)
    assert rest.stack + sum(slot.stack for slot in share) == 12
    assert all(slot.stack <= 5 for slot in share)
    assert all(slot.item == 1 for slot in share)


def test_add_returns_overflow():
    share = ShareItem(2)
    rest = share.add(1, 20, 5)
    assert rest == UniqueItem(1, 20 - 2 * 5)
    assert [slot.stack for slot in share] == [5, 5]


def test_add_skips_slots_of_other_items():
    share = ShareItem(2)
    share.put(0, 3, 2)
    rest = share.add(1, 4, 10)
    assert rest.stack == 0
    assert share[0] == UniqueItem(3, 2)
    assert share[1] == UniqueItem(1, 4)


def test_clear_returns_previous_content():
    share = ShareItem(2)
    share.put(1, UniqueItem(4, 7))
    assert share.clear(1) == UniqueItem(4, 7)
    assert share[1] == UniqueItem()
    assert share.clear(5) == UniqueItem()


def test_put_out_of_range_raises():
    share = ShareItem(1)
    with pytest.raises(IndexError):
        share.put(1, 2)


def test_grow_clamps_and_adds_empty_slots():
    share = ShareItem(3)
    share.put(0, 1, 1)
    share.grow(2)
    assert len(share) == 5
    assert share[4] == UniqueItem()
    share.grow(-100)
    assert len(share) == 0


def test_resize_negative_raises():
    with pytest.raises(ValueError):
        ShareItem(2).resize(-1)


def test_sorting_orders_slots():
    share = ShareItem(4)
    share.put(0, 2, 1).put(1, 1, 9).put(2, 2, 0).put(3, 1, 3)
    up = [(s.item, s.stack) for s in share.sort_up()]
    assert all(a <= b for a, b in zip(up, up[1:]))
    down = [(s.item, s.stack) for s in share.sort_down()]
    assert down == list(reversed(up))


def test_inventory_selection_wraps():
    inv = Inventory(ShareItem(8), 8, 0)
    inv.select_previous(True)
    assert inv.select_frame == 8 - 1
    inv.select_next(True)
    assert inv.select_frame == 0
    inv.select_next(False)
    assert inv.select_frame == 0


def test_select_add_round_trip():
    inv = Inventory(ShareItem(5), 5, 2)
    inv.select_add(3).select_add(-3)
    assert inv.select_frame == 2


def test_inventory_clear_item_empties_selected_slot():
    share = ShareItem(3)
    share.put(1, 6, 2)
    inv = Inventory(share, 3, 1)
    assert inv.clear_item() == UniqueItem(6, 2)
    assert share[1] == UniqueItem()
    assert Inventory(None, 3, 0).clear_item() == UniqueItem()


def test_inventory_grow_changes_slots_and_frames():
    share = ShareItem(4)
    inv = Inventory(share, 4, 0).grow(2)
    assert inv.num_frame == len(share) == 6
    inv.grow(-50)
    assert inv.num_frame == len(share) == 0