# data/__init__.py
"""
Data layer for MongoDB operations.
One repository module per collection, sharing the connection in `repositories.base`.
"""

from .repositories.base import close_connection, get_collection, get_database

__all__ = [
	'close_connection',
	'get_collection',
	'get_database'
]
