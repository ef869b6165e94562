# tenant_service/cli/__init__.py
