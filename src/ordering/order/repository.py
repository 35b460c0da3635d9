"""Order Store — persistence of Order aggregates with their items.

Reading and writing always covers the whole aggregate. ``update`` reconciles
the caller's item collection against the persisted one, keyed by item
identity:

- persisted items whose id the caller no longer supplies are removed
- supplied items whose id matches a persisted item overwrite it in place
- everything else is attached as a new item

Applying the same collection twice, or the same items in a different order,
leaves the stored rows unchanged.
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from protean import UnitOfWork
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_uow

from ordering.domain import ordering
from ordering.order.order import HEADER_FIELDS, ITEM_FIELDS, Order, OrderItem, OrderStatus
from shared.errors import DomainError, Errors, ErrorKind, error_kind

logger = structlog.get_logger(__name__)


@contextmanager
def _translate_errors(operation: str, order_id=None) -> Iterator[None]:
    """Map persistence failures onto the shared error kinds."""
    try:
        yield
    except DomainError:
        raise
    except ObjectNotFoundError as exc:
        raise Errors.not_found(f"Order {order_id} not found") from exc
    except Exception as exc:
        kind = error_kind(exc)
        if kind is ErrorKind.TRANSIENT:
            logger.error("Transient persistence failure", operation=operation, order_id=order_id, error=str(exc))
            raise
        if kind is ErrorKind.CONSTRAINT_VIOLATION:
            logger.warning("Constraint violation", operation=operation, order_id=order_id, error=str(exc))
            raise Errors.constraint_violation(f"Constraint violation during {operation}: {exc}") from exc
        logger.error("Repository failure", operation=operation, order_id=order_id, error=str(exc))
        raise Errors.unexpected(f"Repository error during {operation}: {exc}") from exc


def _unique_by_id(items: list[OrderItem]) -> list[OrderItem]:
    """Collapse repeated ids; the last occurrence supplies the values."""
    latest = {}
    anonymous = []
    for item in items:
        if item.id is None:
            anonymous.append(item)
        else:
            latest[item.id] = item
    return [*latest.values(), *anonymous]


@ordering.repository(part_of=Order)
class OrderRepository:
    def create(self, order: Order) -> Order:
        with _translate_errors("create", order.id):
            self.add(order)
        logger.info("Order created", order_id=str(order.id), items=len(order.items))
        return order

    def get_by_id(self, order_id) -> Order:
        with _translate_errors("get_by_id", order_id):
            return self.get(order_id)

    def list_by_status(self, status) -> list[Order]:
        if isinstance(status, OrderStatus):
            status = status.value
        with _translate_errors("list_by_status"):
            return self._dao.query.filter(status=status).all().items

    def list_by_member(self, member_card_no: str) -> list[Order]:
        with _translate_errors("list_by_member"):
            return self._dao.query.filter(member_card_no=member_card_no).all().items

    def update(self, order: Order, items: list[OrderItem] | None = None) -> Order:
        """Overwrite the persisted order's header and reconcile its items.

        ``items`` is the complete replacement collection. It defaults to the
        items held by ``order``, which is only safe for an aggregate loaded
        through this repository: a detached order carrying a persisted id
        lazy-loads the stored rows into its collection.

        Header and item changes are committed together.
        """
        if items is None:
            items = list(order.items)

        with _translate_errors("update", order.id):
            existing = self.get(order.id)

            for field_name in HEADER_FIELDS:
                setattr(existing, field_name, getattr(order, field_name))

            self._reconcile_items(existing, items)
            self.add(existing)

        logger.debug("Order updated", order_id=str(existing.id), status=existing.status, total=existing.total)
        return existing

    def delete(self, order_id) -> None:
        """Remove the order together with all of its items."""
        with _translate_errors("delete", order_id):
            if current_uow and current_uow.in_progress:
                self._delete(order_id)
            else:
                with UnitOfWork():
                    self._delete(order_id)
        logger.info("Order deleted", order_id=str(order_id))

    def _delete(self, order_id) -> None:
        order = self.get(order_id)
        for item in list(order.items):
            order.remove_items(item)
        self.add(order)
        self._dao.delete(order)

    def _reconcile_items(self, existing: Order, incoming: list[OrderItem]) -> None:
        # Work from copies; the aggregate's collection changes underneath us
        persisted = list(existing.items)
        incoming = _unique_by_id(incoming)
        incoming_ids = {item.id for item in incoming if item.id is not None}

        for item in persisted:
            if item.id not in incoming_ids:
                existing.remove_items(item)

        by_id = {item.id: item for item in persisted if item.id in incoming_ids}
        for item in incoming:
            match = by_id.get(item.id)
            if match is not None:
                for field_name in ITEM_FIELDS:
                    setattr(match, field_name, getattr(item, field_name))
                # Re-adding a known item registers it as updated
                existing.add_items(match)
            else:
                values = {field_name: getattr(item, field_name) for field_name in ITEM_FIELDS}
                if item.id is not None:
                    values["id"] = item.id
                existing.add_items(OrderItem(**values))
