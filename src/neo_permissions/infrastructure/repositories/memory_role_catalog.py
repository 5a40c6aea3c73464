"""In-memory role catalog.

ONLY in-memory role lookup - a dictionary-backed RoleCatalog for tests
and for hosts prototyping without a real permission store.
"""

import logging
from typing import Dict, Iterable, Optional

from ...core.entities import RoleDefinition

logger = logging.getLogger(__name__)


class InMemoryRoleCatalog:
    """Role definitions keyed by scope and case-insensitive name."""

    def __init__(self):
        self._scopes: Dict[str, Dict[str, RoleDefinition]] = {}

    def add(self, scope_id: str, definition: RoleDefinition) -> None:
        """Register a role definition in a scope.

        Raises:
            ValueError: If the scope already has a role with the same name
        """
        roles = self._scopes.setdefault(scope_id, {})
        key = definition.name.casefold()
        if key in roles:
            raise ValueError(f"Role '{definition.name}' already exists in scope {scope_id}")
        roles[key] = definition
        logger.debug(f"Registered role '{definition.name}' in scope {scope_id}")

    def add_all(self, scope_id: str, definitions: Iterable[RoleDefinition]) -> None:
        for definition in definitions:
            self.add(scope_id, definition)

    def lookup(self, scope_id: str, name: str) -> Optional[RoleDefinition]:
        return self._scopes.get(scope_id, {}).get(name.casefold())
