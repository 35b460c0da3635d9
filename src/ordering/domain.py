"""Ordering bounded context — order lifecycle and its consistency engine.

Handles order creation, line-item addition, confirmation and payment. The
Order aggregate is persisted as a whole through OrderRepository, which
reconciles the line items against the stored rows on every update.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
