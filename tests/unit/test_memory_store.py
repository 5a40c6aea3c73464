"""Tests for in-memory permission store implementations."""

import pytest

from neo_permissions.core.entities import Principal, RoleAssignment
from neo_permissions.core.protocols import RoleCatalog, SecurableResource
from neo_permissions.core.value_objects import BasePermissions
from neo_permissions.infrastructure import InMemoryRoleCatalog, InMemorySecurableResource

from ..conftest import SCOPE_ID, READ, CONTRIBUTE


class TestInMemoryRoleCatalog:
    """Test cases for InMemoryRoleCatalog."""

    def test_satisfies_protocol(self, catalog):
        assert isinstance(catalog, RoleCatalog)

    def test_lookup_by_case_insensitive_name(self, catalog, read_role):
        assert catalog.lookup(SCOPE_ID, "READ") is read_role
        assert catalog.lookup(SCOPE_ID, "Auditor") is None
        assert catalog.lookup("other-scope", "Read") is None

    def test_duplicate_name_rejected(self, catalog, read_role):
        with pytest.raises(ValueError, match="already exists"):
            catalog.add(SCOPE_ID, read_role)

    def test_scopes_are_isolated(self, read_role):
        catalog = InMemoryRoleCatalog()
        catalog.add("site-a", read_role)

        assert catalog.lookup("site-b", "Read") is None


class TestInMemorySecurableResource:
    """Test cases for InMemorySecurableResource."""

    def test_satisfies_protocol(self, site):
        assert isinstance(site, SecurableResource)

    def test_root_is_unique_and_children_inherit(self, site, document_list, list_item):
        assert site.has_unique_role_assignments
        assert not document_list.has_unique_role_assignments
        assert not list_item.has_unique_role_assignments
        assert list_item.scope_id == SCOPE_ID

    def test_inherits_parent_assignments(self, site, list_item, alice, read_role):
        site.add_role_assignment(RoleAssignment(alice, [read_role]))

        assert len(list_item.role_assignments) == 1
        assert list_item.get_effective_permissions("corp\\alice") == READ

    def test_break_with_copy(self, site, document_list, alice, read_role):
        site.add_role_assignment(RoleAssignment(alice, [read_role]))

        document_list.break_role_inheritance(True)

        assert document_list.has_unique_role_assignments
        assert document_list.role_assignments[0].role_names == ["Read"]
        assert document_list.role_assignments[0] is not site.role_assignments[0]

    def test_break_without_copy(self, site, document_list, alice, read_role):
        site.add_role_assignment(RoleAssignment(alice, [read_role]))

        document_list.break_role_inheritance(False)

        assert document_list.role_assignments == ()
        assert document_list.get_effective_permissions("CORP\\alice") == BasePermissions.EMPTY_MASK

    def test_break_is_idempotent(self, document_list):
        document_list.break_role_inheritance(True)
        document_list.break_role_inheritance(True)

        assert document_list.mutation_count == 1

    def test_add_merges_into_existing_member_assignment(
        self, site, editors, read_role, contribute_role
    ):
        site.add_role_assignment(RoleAssignment(Principal.group("Editors"), [read_role]))
        site.add_role_assignment(RoleAssignment(Principal.group("EDITORS"), [contribute_role, read_role]))

        assignments = site.assignments_for(editors)
        assert len(assignments) == 1
        assert assignments[0].role_names == ["Read", "Contribute"]
        assert assignments[0].base_permissions == READ | CONTRIBUTE
        assert site.mutation_count == 2

    def test_added_assignment_not_shared_with_caller(self, site, alice, read_role, approve_role):
        assignment = RoleAssignment(alice, [read_role])
        site.add_role_assignment(assignment)

        assignment.add_binding(approve_role)

        assert site.assignments_for(alice)[0].role_names == ["Read"]

    def test_unique_assignments_detached_from_parent(self, site, document_list, bob, read_role):
        document_list.break_role_inheritance(True)
        site.add_role_assignment(RoleAssignment(bob, [read_role]))

        assert document_list.assignments_for(bob) == []

    def test_add_to_inheriting_resource_rejected(self, document_list, alice, read_role):
        with pytest.raises(ValueError, match="inherits permissions"):
            document_list.add_role_assignment(RoleAssignment(alice, [read_role]))

    def test_reset_role_inheritance(self, site, document_list, alice, read_role):
        document_list.break_role_inheritance(False)
        document_list.add_role_assignment(RoleAssignment(alice, [read_role]))

        document_list.reset_role_inheritance()

        assert not document_list.has_unique_role_assignments
        assert document_list.role_assignments == site.role_assignments

    def test_root_cannot_reset(self, site):
        with pytest.raises(ValueError, match="root resource"):
            site.reset_role_inheritance()

    def test_effective_permissions_include_group_membership(
        self, site, alice, bob, editors, read_role, contribute_role
    ):
        site.register_group(editors)
        site.add_role_assignment(RoleAssignment(alice, [read_role]))
        site.add_role_assignment(RoleAssignment(Principal.group("Editors"), [contribute_role]))

        assert site.get_effective_permissions("CORP\\alice") == READ | CONTRIBUTE
        assert site.get_effective_permissions("CORP\\bob") == BasePermissions.EMPTY_MASK

    def test_register_group_rejects_users(self, site, alice):
        with pytest.raises(ValueError, match="not a group"):
            site.register_group(alice)
