"""
Database package for the laundry booking platform
Contains the in-memory database and repository classes
"""

from .connection import DatabaseConnection
from .repository import (
    UserRepository, CatalogRepository, OrderRepository, RiderRepository, AreaRepository
)

__all__ = [
    'DatabaseConnection',
    'UserRepository', 'CatalogRepository', 'OrderRepository', 'RiderRepository', 'AreaRepository'
]
