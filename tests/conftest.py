import pytest

from orders import services


@pytest.fixture
def pair(db):
    """(order_id, review_id) of a freshly created, linked pair."""
    return services.create_order_with_review()
