"""Application tests for failure classification across the store and handlers."""

import pytest
from ordering.member_points import get_member_points
from ordering.order.confirmation import ConfirmOrder
from ordering.order.creation import CreateOrder
from ordering.order.modification import AddOrderItem
from ordering.order.order import Order, OrderStatus
from ordering.order.payment import PayOrder
from ordering.product_lookup import get_product_catalog
from protean import current_domain
from protean.exceptions import ValidationError
from shared.errors import DomainError, ErrorKind


def _process(command):
    return current_domain.process(command, asynchronous=False)


def _failing(exc):
    def _raise(*args, **kwargs):
        raise exc

    return _raise


class TestStoreFailures:
    def test_rejected_write_is_constraint_violation(self, monkeypatch):
        repo = current_domain.repository_for(Order)
        monkeypatch.setattr(repo, "add", _failing(ValidationError({"status": ["invalid"]})))

        with pytest.raises(DomainError) as exc:
            repo.create(Order.create())

        assert exc.value.kind is ErrorKind.CONSTRAINT_VIOLATION

    def test_connectivity_failure_passes_through(self, monkeypatch):
        repo = current_domain.repository_for(Order)
        monkeypatch.setattr(repo, "add", _failing(ConnectionError("database unreachable")))

        with pytest.raises(ConnectionError):
            repo.create(Order.create())

    def test_unknown_failure_wrapped_with_operation(self, monkeypatch):
        repo = current_domain.repository_for(Order)
        order = repo.create(Order.create())
        monkeypatch.setattr(repo, "add", _failing(KeyError("disk")))

        with pytest.raises(DomainError) as exc:
            repo.update(order)

        assert exc.value.kind is ErrorKind.UNEXPECTED
        assert exc.value.message.startswith("Repository error during update")


class TestHandlerFailures:
    def test_product_lookup_timeout_is_transient(self):
        order = _process(CreateOrder())
        get_product_catalog().configure(failure=TimeoutError("catalogue timed out"))

        with pytest.raises(TimeoutError):
            _process(AddOrderItem(order_id=order.id, product_id="p1", quantity=1))

        assert len(current_domain.repository_for(Order).get_by_id(order.id).items) == 0

    def test_unexpected_lookup_failure_wrapped_by_service(self):
        order = _process(CreateOrder())
        get_product_catalog().configure(failure=RuntimeError("bad payload"))

        with pytest.raises(DomainError) as exc:
            _process(AddOrderItem(order_id=order.id, product_id="p1", quantity=1))

        assert exc.value.kind is ErrorKind.UNEXPECTED
        assert exc.value.message == "Service error: bad payload"

    def test_points_outage_leaves_order_confirmed(self):
        order = _process(CreateOrder(member_card_no="M-001"))
        _process(ConfirmOrder(order_id=order.id))
        get_member_points().configure(failure=ConnectionError("points service down"))

        with pytest.raises(ConnectionError):
            _process(PayOrder(order_id=order.id, payment_method="POINTS"))

        assert current_domain.repository_for(Order).get_by_id(order.id).status == OrderStatus.CONFIRMED.value
