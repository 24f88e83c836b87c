"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from spine import ResourceRegistry
from tests.sample_resources import Comment, Post

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def registry() -> ResourceRegistry:
    registry = ResourceRegistry()
    registry.register(Post)
    registry.register(Comment)
    return registry


@pytest.fixture
def loaded_post() -> Post:
    """Return a post in the state an external loader leaves it in."""
    post = Post("42")
    post.url = "https://api.example.com/posts/42"
    post.is_loaded = True
    post.meta = {"k": "v"}
    post.title = "Hello"
    post.body = "World"
    return post
