"""Application tests for the Order store: persistence and item reconciliation."""

import pytest
from ordering.order.order import Order, OrderItem, OrderStatus
from protean import current_domain
from shared.errors import DomainError, ErrorKind


def _repo():
    return current_domain.repository_for(Order)


def _item(product_id="p1", quantity=1, unit_price=100.0, discount_percent=0, **kwargs):
    return OrderItem(
        product_id=product_id,
        product_name=f"Product {product_id}",
        unit_price=unit_price,
        discount_percent=discount_percent,
        quantity=quantity,
        **kwargs,
    )


def _persisted_order(*items, member_card_no="M-001"):
    order = Order.create(member_card_no=member_card_no, items=list(items))
    return _repo().create(order)


def _caller_copy(order):
    """A detached order carrying the caller's view of the header."""
    return Order(
        id=order.id,
        member_card_no=order.member_card_no,
        status=order.status,
        total=order.total,
        created_at=order.created_at,
    )


def _replace_items(order, items):
    return _repo().update(_caller_copy(order), items=items)


def _rows(order_id):
    order = _repo().get_by_id(order_id)
    return {item.id: item for item in order.items}


class TestCreateAndRead:
    def test_create_persists_order_with_items(self):
        order = _persisted_order(_item("p1", 2), _item("p2", 1))

        loaded = _repo().get_by_id(order.id)
        assert loaded.member_card_no == "M-001"
        assert loaded.status == OrderStatus.IN_ORDER.value
        assert loaded.total == 300.0
        assert len(loaded.items) == 2

    def test_get_unknown_order_is_not_found(self):
        with pytest.raises(DomainError) as exc:
            _repo().get_by_id("does-not-exist")

        assert exc.value.kind is ErrorKind.NOT_FOUND

    def test_list_by_status(self):
        open_order = _persisted_order()
        confirmed = _persisted_order()
        confirmed.confirm()
        _repo().update(confirmed)

        open_ids = [o.id for o in _repo().list_by_status(OrderStatus.IN_ORDER)]
        confirmed_ids = [o.id for o in _repo().list_by_status("CONFIRMED")]

        assert open_ids == [open_order.id]
        assert confirmed_ids == [confirmed.id]
        assert _repo().list_by_status(OrderStatus.PAID) == []

    def test_list_by_member(self):
        mine = _persisted_order(member_card_no="M-100")
        _persisted_order(member_card_no="M-200")

        assert [o.id for o in _repo().list_by_member("M-100")] == [mine.id]
        assert _repo().list_by_member("M-999") == []


class TestReconciliation:
    def test_matched_item_updated_and_new_item_added(self):
        order = _persisted_order(_item("A", 1))
        a_id = order.items[0].id

        incoming = [
            _item("A", 5, id=a_id),
            _item("B", 2),
        ]
        _replace_items(order, incoming)

        rows = _rows(order.id)
        assert len(rows) == 2
        assert rows[a_id].quantity == 5
        assert [row.product_id for row_id, row in rows.items() if row_id != a_id] == ["B"]

    def test_omitted_item_removed_and_others_untouched(self):
        order = _persisted_order(_item("A", 1), _item("B", 3))
        a_item, b_item = order.items[0], order.items[1]

        _replace_items(order, [_item("A", 1, id=a_item.id)])

        rows = _rows(order.id)
        assert list(rows) == [a_item.id]
        assert rows[a_item.id].quantity == 1
        assert b_item.id not in rows

    def test_update_is_idempotent(self):
        order = _persisted_order(_item("A", 1))
        a_id = order.items[0].id
        new_id = _item("B").id

        for _ in range(2):
            _replace_items(order, [_item("A", 4, id=a_id), _item("B", 1, id=new_id)])

        rows = _rows(order.id)
        assert sorted(rows) == sorted([a_id, new_id])
        assert rows[a_id].quantity == 4
        assert rows[new_id].quantity == 1

    def test_reordering_items_changes_nothing(self):
        order = _persisted_order(_item("A", 1), _item("B", 2), _item("C", 3))
        before = {item.id: item.quantity for item in _repo().get_by_id(order.id).items}

        reordered = [_item(i.product_id, i.quantity, id=i.id) for i in reversed(order.items)]
        _replace_items(order, reordered)

        after = {item.id: item.quantity for item in _repo().get_by_id(order.id).items}
        assert after == before

    def test_snapshot_fields_replaced_in_place(self):
        order = _persisted_order(_item("A", 1, unit_price=100.0, discount_percent=0))
        a_id = order.items[0].id

        _replace_items(order, [_item("A", 1, unit_price=80.0, discount_percent=25, id=a_id)])

        row = _rows(order.id)[a_id]
        assert row.unit_price == 80.0
        assert row.discount_percent == 25

    def test_empty_replacement_removes_every_row(self):
        order = _persisted_order(_item("A"), _item("B"))

        _replace_items(order, [])

        assert _rows(order.id) == {}
        assert len(_repo().get_by_id(order.id).items) == 0

    def test_repeated_id_takes_last_values(self):
        order = _persisted_order(_item("A", 1))
        a_id = order.items[0].id

        _replace_items(order, [_item("A", 2, id=a_id), _item("A", 7, id=a_id)])

        rows = _rows(order.id)
        assert list(rows) == [a_id]
        assert rows[a_id].quantity == 7

    def test_header_fields_overwritten(self):
        order = _persisted_order(_item("A", 2))
        order.confirm()

        updated = _repo().update(order)

        loaded = _repo().get_by_id(order.id)
        assert updated.status == loaded.status == OrderStatus.CONFIRMED.value
        assert loaded.confirmed is True
        assert loaded.total == 200.0

    def test_aggregate_mutation_persisted_through_update(self):
        order = _persisted_order()
        loaded = _repo().get_by_id(order.id)
        loaded.add_item(product_id="A", product_name="Tea", unit_price=450.0, quantity=2)
        loaded.add_item(product_id="B", product_name="Cake", unit_price=300.0, discount_percent=10, quantity=1)

        _repo().update(loaded)

        reloaded = _repo().get_by_id(order.id)
        assert len(reloaded.items) == 2
        assert reloaded.total == 1170.0

    def test_update_unknown_order_is_not_found(self):
        detached = Order.create()

        with pytest.raises(DomainError) as exc:
            _repo().update(detached)

        assert exc.value.kind is ErrorKind.NOT_FOUND


class TestDelete:
    def test_delete_removes_order(self):
        order = _persisted_order(_item("A"), _item("B"))

        _repo().delete(order.id)

        with pytest.raises(DomainError) as exc:
            _repo().get_by_id(order.id)
        assert exc.value.kind is ErrorKind.NOT_FOUND

    def test_delete_unknown_order_is_not_found(self):
        with pytest.raises(DomainError) as exc:
            _repo().delete("does-not-exist")

        assert exc.value.kind is ErrorKind.NOT_FOUND
