# tests/test_tenant_store.py
"""Behavior shared by every tenant store implementation."""
from uuid import UUID, uuid4

import pytest

from tenant_service.tenants.errors import (
    ApplicationNotFoundError,
    InvalidIdentifierError,
    TenantNotFoundError,
)
from tenant_service.tenants.models import Application, Tenant


async def test_missing_tenant_is_not_found_for_read_update_delete(tenant_store):
    missing_id = uuid4()

    with pytest.raises(TenantNotFoundError) as read_error:
        await tenant_store.read_tenant(missing_id)
    with pytest.raises(TenantNotFoundError):
        await tenant_store.update_tenant(missing_id, Tenant(secret_key="new"))
    with pytest.raises(TenantNotFoundError):
        await tenant_store.delete_tenant(missing_id)

    assert read_error.value.tenant_id == missing_id
    assert read_error.value.application_id is None


async def test_update_of_missing_tenant_creates_no_row(tenant_store):
    missing_id = uuid4()

    with pytest.raises(TenantNotFoundError):
        await tenant_store.update_tenant(missing_id, Tenant(secret_key="new"))

    with pytest.raises(TenantNotFoundError):
        await tenant_store.read_tenant(missing_id)


async def test_created_tenant_can_be_read_back(tenant_store, uuid_generator):
    tenant = Tenant(secret_key="s3cr3t")

    tenant_id = await tenant_store.create_tenant(tenant)

    assert isinstance(tenant_id, UUID)
    assert uuid_generator.generated == [tenant_id]
    assert await tenant_store.read_tenant(tenant_id) == tenant


async def test_update_overwrites_secret_key(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="first"))

    await tenant_store.update_tenant(tenant_id, Tenant(secret_key="second"))

    assert await tenant_store.read_tenant(tenant_id) == Tenant(secret_key="second")


async def test_deleted_tenant_is_not_found(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))

    await tenant_store.delete_tenant(tenant_id)

    with pytest.raises(TenantNotFoundError):
        await tenant_store.read_tenant(tenant_id)


async def test_tenant_id_accepts_canonical_string_and_bytes(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))

    assert await tenant_store.read_tenant(str(tenant_id)) == Tenant(secret_key="s3cr3t")
    assert await tenant_store.read_tenant(tenant_id.bytes) == Tenant(secret_key="s3cr3t")


async def test_malformed_tenant_id_is_rejected(tenant_store):
    with pytest.raises(InvalidIdentifierError):
        await tenant_store.read_tenant("not-a-uuid")


async def test_create_application_for_missing_tenant_fails_without_generating_id(tenant_store, uuid_generator):
    missing_id = uuid4()

    with pytest.raises(TenantNotFoundError):
        await tenant_store.create_application(missing_id, Application(name="billing"))

    assert uuid_generator.generated == []


async def test_created_application_can_be_read_and_listed(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))
    application = Application(name="billing")

    application_id = await tenant_store.create_application(tenant_id, application)

    assert await tenant_store.read_application(tenant_id, application_id) == application
    assert await tenant_store.read_all_applications(tenant_id) == {application_id: application}


async def test_read_all_applications_is_scoped_to_tenant(tenant_store):
    first_tenant = await tenant_store.create_tenant(Tenant(secret_key="one"))
    second_tenant = await tenant_store.create_tenant(Tenant(secret_key="two"))
    billing_id = await tenant_store.create_application(first_tenant, Application(name="billing"))
    search_id = await tenant_store.create_application(first_tenant, Application(name="search"))
    await tenant_store.create_application(second_tenant, Application(name="other"))

    applications = await tenant_store.read_all_applications(first_tenant)

    assert applications == {
        billing_id: Application(name="billing"),
        search_id: Application(name="search"),
    }
    assert all(isinstance(key, UUID) for key in applications)


async def test_read_all_applications_of_tenant_without_applications_is_empty(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))

    assert await tenant_store.read_all_applications(tenant_id) == {}


async def test_application_operations_check_tenant_first(tenant_store):
    missing_tenant = uuid4()
    application_id = uuid4()

    with pytest.raises(TenantNotFoundError):
        await tenant_store.update_application(missing_tenant, application_id, Application(name="x"))
    with pytest.raises(TenantNotFoundError):
        await tenant_store.read_application(missing_tenant, application_id)
    with pytest.raises(TenantNotFoundError):
        await tenant_store.read_all_applications(missing_tenant)
    with pytest.raises(TenantNotFoundError):
        await tenant_store.delete_application(missing_tenant, application_id)


async def test_missing_application_is_not_found(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))
    missing_application = uuid4()

    with pytest.raises(ApplicationNotFoundError) as read_error:
        await tenant_store.read_application(tenant_id, missing_application)
    with pytest.raises(ApplicationNotFoundError):
        await tenant_store.update_application(tenant_id, missing_application, Application(name="x"))
    with pytest.raises(ApplicationNotFoundError):
        await tenant_store.delete_application(tenant_id, missing_application)

    assert read_error.value.tenant_id == tenant_id
    assert read_error.value.application_id == missing_application
    assert await tenant_store.read_all_applications(tenant_id) == {}


async def test_update_application_overwrites_name(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))
    application_id = await tenant_store.create_application(tenant_id, Application(name="billing"))

    await tenant_store.update_application(tenant_id, application_id, Application(name="invoicing"))

    assert await tenant_store.read_application(tenant_id, application_id) == Application(name="invoicing")
    assert await tenant_store.read_all_applications(tenant_id) == {application_id: Application(name="invoicing")}


async def test_deleted_application_is_gone(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))
    kept_id = await tenant_store.create_application(tenant_id, Application(name="kept"))
    deleted_id = await tenant_store.create_application(tenant_id, Application(name="deleted"))

    await tenant_store.delete_application(tenant_id, deleted_id)

    with pytest.raises(ApplicationNotFoundError):
        await tenant_store.read_application(tenant_id, deleted_id)
    assert await tenant_store.read_all_applications(tenant_id) == {kept_id: Application(name="kept")}


async def test_deleting_tenant_hides_its_applications(tenant_store):
    tenant_id = await tenant_store.create_tenant(Tenant(secret_key="s3cr3t"))
    application_id = await tenant_store.create_application(tenant_id, Application(name="billing"))
    assert await tenant_store.read_application(tenant_id, application_id) == Application(name="billing")

    await tenant_store.delete_tenant(tenant_id)

    with pytest.raises(TenantNotFoundError) as error:
        await tenant_store.read_application(tenant_id, application_id)
    assert error.value.application_id is None
