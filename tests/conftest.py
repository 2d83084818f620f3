"""
Pytest configuration and fixtures for DBML parser tests.
"""

import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config.settings import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached Settings so env changes made by a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_dbml():
    """Sample schema mixing both reference notations."""
    return """
Table users {
  id integer [pk]
  username varchar
  role varchar
  created_at timestamp
}

Table posts {
  id integer [primary key]
  title varchar
  body text
  user_id integer [ref: > users.id]
  status varchar
}

Table follows {
  following_user_id integer
  followed_user_id integer
}

Ref: "follows"."following_user_id" > "users"."id"
Ref: "follows"."followed_user_id" > "users"."id"
Ref: "posts"."user_id" > "users"."id"
"""


@pytest.fixture
def minimal_dbml():
    """Minimal schema for simple tests."""
    return "Table T {\n  a int [pk]\n  b text\n}"
