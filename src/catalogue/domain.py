"""Catalogue bounded context — products and their categories.

Read-only from the ordering side: the storefront lists products, with their
campaign-discounted prices, alongside every category.
"""

import structlog
from protean.domain import Domain

catalogue = Domain(name="catalogue")

logger = structlog.get_logger(__name__)
