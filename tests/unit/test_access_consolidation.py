"""Unit tests for merging a role's permissions with the module catalog."""

from bpm_access.application.services.access_resolution import active_actions, consolidate


def test_active_actions_keep_catalog_key_order() -> None:
    module = {"view": {"actions": {"write": True, "read": True, "delete": False}}}
    assert active_actions(module) == ["write", "read"]


def test_module_without_view_has_no_actions() -> None:
    assert active_actions({"_id": "m1"}) == []
    assert active_actions({"_id": "m1", "view": None}) == []


def test_only_true_values_are_active() -> None:
    module = {"view": {"actions": {"read": "true", "write": 1, "list": True}}}
    assert active_actions(module) == ["list"]


def test_consolidate_single_module() -> None:
    modules = [{"_id": "m1", "view": {"actions": {"read": True, "write": False}}}]
    permissions = [{"moduleId": "m1", "fullAccess": False}]

    [access] = consolidate(permissions, modules)

    assert access.module_id == "m1"
    assert access.full_access is False
    assert access.actions == ["read"]


def test_consolidate_drops_view_and_keeps_other_attributes() -> None:
    modules = [{"_id": "m1", "name": "Sales", "icon": "cart", "view": {"actions": {}}}]

    [access] = consolidate([], modules)
    out = access.to_dict()

    assert "view" not in out
    assert out["icon"] == "cart"
    assert out["moduleName"] == "Sales"
    assert out["fullAccess"] is False


def test_computed_keys_override_catalog_fields() -> None:
    modules = [
        {
            "_id": "m1",
            "name": "Sales",
            "actions": ["legacy"],
            "fullAccess": True,
            "view": {"actions": {"read": True}},
        }
    ]

    out = consolidate([], modules)[0].to_dict()

    assert out["actions"] == ["read"]
    assert out["fullAccess"] is False


def test_consolidate_preserves_module_order_and_defaults() -> None:
    modules = [
        {"_id": "m3", "view": {"actions": {"read": True}}},
        {"_id": "m1", "view": {"actions": {"read": True}}},
        {"_id": "m2", "view": {"actions": {"read": True}}},
    ]
    permissions = [{"moduleId": "m1", "fullAccess": True}]

    result = consolidate(permissions, modules)

    assert [a.module_id for a in result] == ["m3", "m1", "m2"]
    assert [a.full_access for a in result] == [False, True, False]


def test_consolidate_last_duplicate_permission_wins() -> None:
    modules = [{"_id": "m1", "view": {"actions": {"read": True}}}]
    permissions = [
        {"moduleId": "m1", "fullAccess": True},
        {"moduleId": "m1", "fullAccess": False},
    ]
    assert consolidate(permissions, modules)[0].full_access is False


def test_stored_permission_actions_are_not_intersected() -> None:
    """Effective actions are the catalog's active actions, not the permission's list."""
    modules = [{"_id": "m1", "view": {"actions": {"read": True, "write": True}}}]
    permissions = [{"moduleId": "m1", "fullAccess": False, "actions": ["read"]}]
    assert consolidate(permissions, modules)[0].actions == ["read", "write"]
