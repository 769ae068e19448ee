"""Storefront FastAPI application.

Bakery order intake for customers plus the vendor console, served from an
in-memory order store that starts empty on every boot.

Usage:
    uvicorn app:app --host 0.0.0.0 --port 3000 --reload
"""

from storefront.api import create_app
from storefront.domain import storefront

storefront.init()

app = create_app()
