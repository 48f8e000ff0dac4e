"""Unit tests for role-name and permission-pair uniqueness guards."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bpm_access.application.dtos.search import StoreResult
from bpm_access.application.services.uniqueness_guard import (
    PermissionUniquenessGuard,
    RoleNameGuard,
)
from bpm_access.domain.exceptions import (
    PermissionAlreadyExistsException,
    RoleAlreadyExistsException,
    StoreInternalError,
)


def _repo(result: StoreResult) -> MagicMock:
    repo = MagicMock()
    repo.search = AsyncMock(return_value=result)
    return repo


@pytest.mark.asyncio
async def test_role_name_guard_searches_by_name_with_projection() -> None:
    repo = _repo(StoreResult([], 200))

    await RoleNameGuard(repo).ensure_unique("finance", "acme")

    options, tenant = repo.search.await_args.args
    assert tenant == "acme"
    assert options.conditions == [{"name": "finance"}]
    assert options.source_include == ["_id", "name"]


@pytest.mark.asyncio
async def test_role_name_guard_conflict() -> None:
    repo = _repo(StoreResult([{"_id": "r1", "name": "finance"}], 200))
    with pytest.raises(RoleAlreadyExistsException):
        await RoleNameGuard(repo).ensure_unique("finance", "acme")


@pytest.mark.asyncio
async def test_permission_guard_checks_exact_pair() -> None:
    repo = _repo(StoreResult([], 200))

    await PermissionUniquenessGuard(repo).ensure_unique("r1", "m1", "acme")

    options, _ = repo.search.await_args.args
    assert options.conditions == [{"moduleId": "m1", "roleId": "r1"}]


@pytest.mark.asyncio
async def test_permission_guard_conflict() -> None:
    repo = _repo(StoreResult([{"_id": "p1"}], 200))
    with pytest.raises(PermissionAlreadyExistsException):
        await PermissionUniquenessGuard(repo).ensure_unique("r1", "m1", "acme")


@pytest.mark.asyncio
async def test_guard_surfaces_store_internal_error() -> None:
    repo = _repo(StoreResult("unreachable", 500))
    with pytest.raises(StoreInternalError):
        await PermissionUniquenessGuard(repo).ensure_unique("r1", "m1", "acme")


@pytest.mark.asyncio
async def test_replace_transitions_for_one_role_do_not_overlap() -> None:
    guard = PermissionUniquenessGuard(MagicMock())
    active = 0
    peak = 0

    async def transition() -> None:
        nonlocal active, peak
        async with guard.replace_transition("r1", "acme"):
            active += 1
            peak = max(peak, active)
            await asyncio.sleep(0)
            active -= 1

    await asyncio.gather(*(transition() for _ in range(5)))

    assert peak == 1


@pytest.mark.asyncio
async def test_replace_transitions_for_different_roles_run_concurrently() -> None:
    guard = PermissionUniquenessGuard(MagicMock())
    entered = asyncio.Event()

    async def first() -> None:
        async with guard.replace_transition("r1", "acme"):
            await asyncio.wait_for(entered.wait(), timeout=1)

    async def second() -> None:
        async with guard.replace_transition("r2", "acme"):
            entered.set()

    await asyncio.gather(first(), second())
