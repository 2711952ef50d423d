"""
Pytest configuration and fixtures for tests.

This file is automatically loaded by pytest and provides shared fixtures
and configuration for all tests.
"""

import os
import sys
from decimal import Decimal

import pytest

# Set required environment variables before importing app modules
# These are required for config.py to load properly
os.environ.setdefault('RUNTIME_ENVIRONMENT', 'TEST')
os.environ.setdefault('API_BASE_URL', 'http://bookstore.test/api')
os.environ.setdefault('LANGUAGE', 'en')
os.environ.setdefault('CURRENCY_SYMBOL', 'R')
os.environ.setdefault('LOG_MASK_SECRETS', 'true')

# Add parent directory to Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models.catalog_item import CatalogItemDTO  # noqa: E402


@pytest.fixture
def make_book():
    """Factory for catalog books: make_book("1", price="200", stock=5)."""
    def _make(item_id: str = "1", price: str = "100", stock: int = 5, **overrides) -> CatalogItemDTO:
        fields = {
            "id": item_id,
            "title": f"Book {item_id}",
            "author": f"Author {item_id}",
            "price": Decimal(price),
            "stock": stock,
        }
        fields.update(overrides)
        return CatalogItemDTO(**fields)
    return _make
