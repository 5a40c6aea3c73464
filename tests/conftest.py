"""Pytest configuration and fixtures for neo-permissions tests."""

import pytest
from unittest.mock import MagicMock

from neo_permissions.core.entities import Principal, RoleDefinition
from neo_permissions.core.value_objects import BasePermissions
from neo_permissions.infrastructure import InMemoryRoleCatalog, InMemorySecurableResource


SCOPE_ID = "https://portal/sites/finance"

READ = (
    BasePermissions.VIEW_LIST_ITEMS
    | BasePermissions.OPEN_ITEMS
    | BasePermissions.VIEW_VERSIONS
    | BasePermissions.VIEW_FORM_PAGES
    | BasePermissions.OPEN
    | BasePermissions.VIEW_PAGES
    | BasePermissions.BROWSE_USER_INFO
    | BasePermissions.USE_CLIENT_INTEGRATION
    | BasePermissions.USE_REMOTE_APIS
    | BasePermissions.CREATE_ALERTS
)

CONTRIBUTE = (
    READ
    | BasePermissions.ADD_LIST_ITEMS
    | BasePermissions.EDIT_LIST_ITEMS
    | BasePermissions.DELETE_LIST_ITEMS
    | BasePermissions.DELETE_VERSIONS
    | BasePermissions.MANAGE_PERSONAL_VIEWS
    | BasePermissions.BROWSE_DIRECTORIES
    | BasePermissions.EDIT_MY_USER_INFO
)

APPROVE = BasePermissions.APPROVE_ITEMS | BasePermissions.OPEN


@pytest.fixture
def read_role():
    return RoleDefinition("Read", READ, description="Can view pages and list items")


@pytest.fixture
def contribute_role():
    return RoleDefinition("Contribute", CONTRIBUTE)


@pytest.fixture
def approve_role():
    return RoleDefinition("Approve", APPROVE)


@pytest.fixture
def full_control_role():
    return RoleDefinition("Full Control", BasePermissions.FULL_MASK)


@pytest.fixture
def catalog(read_role, contribute_role, approve_role, full_control_role):
    """Role catalog for the finance site."""
    catalog = InMemoryRoleCatalog()
    catalog.add_all(SCOPE_ID, [read_role, contribute_role, approve_role, full_control_role])
    return catalog


@pytest.fixture
def site():
    """Root site, always holding unique assignments."""
    return InMemorySecurableResource(SCOPE_ID)


@pytest.fixture
def document_list(site):
    """Document library inheriting from the site."""
    return InMemorySecurableResource(f"{SCOPE_ID}/Documents", parent=site)


@pytest.fixture
def list_item(document_list):
    """List item inheriting from the document library."""
    return InMemorySecurableResource(f"{SCOPE_ID}/Documents/1", parent=document_list)


@pytest.fixture
def alice():
    return Principal.user("CORP\\alice")


@pytest.fixture
def bob():
    return Principal.user("CORP\\bob")


@pytest.fixture
def editors(alice):
    return Principal.group("Editors", members=(alice.login_name.value,))


@pytest.fixture
def mock_resource():
    """Mock securable resource with unique assignments and no grants."""
    resource = MagicMock()
    resource.resource_id = "list-1"
    resource.scope_id = SCOPE_ID
    resource.has_unique_role_assignments = True
    resource.role_assignments = []
    resource.get_effective_permissions.return_value = BasePermissions.EMPTY_MASK
    return resource
