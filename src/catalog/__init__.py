"""Catalog service - CRUD HTTP API over a MongoDB book collection."""

__version__ = "0.1.0"
