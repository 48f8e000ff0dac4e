"""Uniqueness guards for role names and (roleId, moduleId) permission pairs.

Checks are read-then-write with no lock or transaction across processes:
two concurrent creates for the same key can both pass. Replace-all
transitions for one role are serialized within this process only.
"""

from __future__ import annotations

import asyncio
import weakref
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from bpm_access.application.dtos.search import SearchOptions
from bpm_access.application.interfaces.repositories import (
    IPermissionRepository,
    IRoleRepository,
)
from bpm_access.application.services.error_classifier import raise_for_store_status
from bpm_access.core.constants import ROLE_UNIQUENESS_FIELDS
from bpm_access.domain.exceptions import (
    PermissionAlreadyExistsException,
    RoleAlreadyExistsException,
)


class RoleNameGuard:
    """At most one role per normalized name within a tenant."""

    def __init__(self, role_repo: IRoleRepository) -> None:
        self._repo = role_repo

    async def ensure_unique(self, name: str, tenant: str) -> None:
        """Raise RoleAlreadyExistsException if a role named name exists.

        name must already be normalized (lowercase).
        """
        options = SearchOptions(
            source_include=ROLE_UNIQUENESS_FIELDS,
            conditions=[{"name": name}],
        )
        result = raise_for_store_status(await self._repo.search(options, tenant))
        if result.items:
            raise RoleAlreadyExistsException(name)


class PermissionUniquenessGuard:
    """At most one permission per (roleId, moduleId) within a tenant."""

    def __init__(self, permission_repo: IPermissionRepository) -> None:
        self._repo = permission_repo
        self._replace_locks: weakref.WeakValueDictionary[tuple[str, str], asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    async def ensure_unique(self, role_id: str, module_id: str, tenant: str) -> None:
        """Raise PermissionAlreadyExistsException if the pair already has a permission."""
        options = SearchOptions(
            source_include=["_id"],
            conditions=[{"moduleId": module_id, "roleId": role_id}],
        )
        result = raise_for_store_status(await self._repo.search(options, tenant))
        if result.items:
            raise PermissionAlreadyExistsException(role_id, module_id)

    @asynccontextmanager
    async def replace_transition(self, role_id: str, tenant: str) -> AsyncIterator[None]:
        """Hold the in-process lock for replacing role_id's grants in tenant."""
        key = (tenant, role_id)
        lock = self._replace_locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._replace_locks[key] = lock
        async with lock:
            yield
