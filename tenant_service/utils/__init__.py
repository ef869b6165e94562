# tenant_service/utils/__init__.py

"""
Utility module initialization file.

Exposes the identifier generator collaborator used when new tenants and
applications are created.
"""

from .uuid_generator import AbstractUUIDGenerator, RandomUUIDGenerator

__all__ = ["AbstractUUIDGenerator", "RandomUUIDGenerator"]
