import pytest
from ordering.member_points import reset_member_points
from ordering.product_lookup import reset_product_catalog
from protean.integrations.pytest import DomainFixture


@pytest.fixture(scope="session")
def ordering_bed():
    from ordering.domain import ordering

    bed = DomainFixture(ordering)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(ordering_bed):
    with ordering_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _fake_ports():
    """Every test starts from the default fake adapters."""
    reset_product_catalog()
    reset_member_points()
    yield
    reset_product_catalog()
    reset_member_points()
