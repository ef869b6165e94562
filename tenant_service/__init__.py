# tenant_service/__init__.py
"""Tenant and application data-access service backed by Cassandra."""
