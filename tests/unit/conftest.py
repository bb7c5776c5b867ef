"""
Conftest for unit tests.

Unit tests in this directory do NOT need a running MongoDB. The store is
replaced with mocks, either at the collection level or where the routers
import it.
"""
import pytest
from datetime import datetime
from unittest.mock import AsyncMock, patch


def make_post(post_id: str = "65f1a2b3c4d5e6f7a8b9c0d1", **overrides) -> dict:
    """A stored blog post as BlogPostStore returns it."""
    post = {
        "id": post_id,
        "author": {"firstName": "Ada", "lastName": "Lovelace"},
        "title": "Notes on the Analytical Engine",
        "content": "The engine weaves algebraic patterns.",
        "created": datetime(2026, 1, 15, 9, 30),
    }
    post.update(overrides)
    return post


@pytest.fixture
def mock_store():
    """Patch BlogPostStore as seen by the blog posts router."""
    with patch("api.routers.blog_posts.BlogPostStore") as store:
        store.find_all = AsyncMock(return_value=[])
        store.find_by_id = AsyncMock(return_value=None)
        store.insert_one = AsyncMock()
        store.update_by_id = AsyncMock(return_value=True)
        store.delete_by_id = AsyncMock(return_value=True)
        yield store


@pytest.fixture
def post_factory():
    return make_post
