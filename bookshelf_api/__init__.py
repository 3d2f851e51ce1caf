"""
FastAPI RESTful API for the Bookshelf service.

This package provides:
- Book record creation, listing, retrieval, update and deletion
- Name and reading-progress validation
- An injectable in-memory book store
"""

__version__ = "1.0.0"
