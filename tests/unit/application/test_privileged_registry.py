"""Unit tests for PrivilegedPrincipalRegistry."""

from __future__ import annotations

from azperm.application.permissions import DEFAULT_PRIVILEGED_ROLE_MARKERS, PrivilegedPrincipalRegistry
from azperm.kernel.security import RoleAssignment

ROOT = "/subscriptions/S"
OTHER_ROOT = "/subscriptions/T"


def _assignment(principal: str, role_name: str, root: str = ROOT) -> RoleAssignment:
    return RoleAssignment(f"{root}/providers/Microsoft.Authorization/classicAdministrators/x", root, principal, role_name)


class Fetch:
    def __init__(self, assignments: list[RoleAssignment]) -> None:
        self.assignments = assignments
        self.roots: list[str] = []

    @property
    def calls(self) -> int:
        return len(self.roots)

    def __call__(self, root: str) -> list[RoleAssignment]:
        self.roots.append(root)
        return [a for a in self.assignments if a.scope.lower() == root.lower()]


class TestPrivilegedPrincipalRegistry:
    def test_default_markers(self) -> None:
        assert set(DEFAULT_PRIVILEGED_ROLE_MARKERS) == {"CoAdministrator", "ServiceAdministrator"}

    def test_populate_filters_on_role_name_markers(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        registry.populate(
            ROOT,
            Fetch(
                [
                    _assignment("admin@contoso.com", "ServiceAdministrator;AccountAdministrator"),
                    _assignment("co@contoso.com", "CoAdministrator"),
                    _assignment("owner@contoso.com", "Owner"),
                    _assignment("account@contoso.com", "AccountAdministrator"),
                ]
            ),
        )
        assert registry.contains(ROOT, "admin@contoso.com")
        assert registry.contains(ROOT, "co@contoso.com")
        assert not registry.contains(ROOT, "owner@contoso.com")
        assert not registry.contains(ROOT, "account@contoso.com")

    def test_populate_passes_root_to_fetch(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        fetch = Fetch([])
        registry.populate(ROOT, fetch)
        assert fetch.roots == [ROOT]

    def test_marker_is_a_whole_value_not_a_substring(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        registry.populate(ROOT, Fetch([_assignment("x@contoso.com", "NotACoAdministratorReally")]))
        assert not registry.contains(ROOT, "x@contoso.com")

    def test_population_and_lookup_both_canonicalize(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        registry.populate(
            ROOT, Fetch([_assignment("alice_contoso.com#EXT#@tenant.onmicrosoft.com", "CoAdministrator")])
        )
        assert registry.contains(ROOT, "alice@contoso.com")
        assert registry.contains(ROOT, "ALICE_contoso.com#EXT#@tenant.onmicrosoft.com")

    def test_root_key_is_case_insensitive(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        registry.populate(ROOT, Fetch([_assignment("co@contoso.com", "CoAdministrator")]))
        assert registry.contains("/SUBSCRIPTIONS/s/", "co@contoso.com")
        assert registry.is_populated("/Subscriptions/S")

    def test_membership_is_per_subscription(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        fetch = Fetch([_assignment("co@contoso.com", "CoAdministrator")])
        registry.ensure_populated(ROOT, fetch)
        assert registry.contains(ROOT, "co@contoso.com")
        assert not registry.contains(OTHER_ROOT, "co@contoso.com")
        assert not registry.is_populated(OTHER_ROOT)

        registry.ensure_populated(OTHER_ROOT, fetch)
        assert fetch.roots == [ROOT, OTHER_ROOT]
        assert not registry.contains(OTHER_ROOT, "co@contoso.com")
        assert len(registry) == 2

    def test_ensure_populated_reuses_non_empty_set(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        fetch = Fetch([_assignment("co@contoso.com", "CoAdministrator")])
        registry.ensure_populated(ROOT, fetch)
        registry.ensure_populated(ROOT, fetch)
        assert fetch.calls == 1
        assert registry.is_populated(ROOT)

    def test_ensure_populated_retries_when_empty(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        fetch = Fetch([])
        registry.ensure_populated(ROOT, fetch)
        registry.ensure_populated(ROOT, fetch)
        assert fetch.calls == 2

    def test_clear_drops_every_subscription(self) -> None:
        registry = PrivilegedPrincipalRegistry()
        fetch = Fetch(
            [
                _assignment("co@contoso.com", "CoAdministrator"),
                _assignment("other@contoso.com", "CoAdministrator", OTHER_ROOT),
            ]
        )
        registry.ensure_populated(ROOT, fetch)
        registry.ensure_populated(OTHER_ROOT, fetch)
        registry.clear()
        assert len(registry) == 0
        assert not registry.is_populated(ROOT)
        assert not registry.contains(ROOT, "co@contoso.com")
        assert not registry.contains(OTHER_ROOT, "other@contoso.com")
        registry.ensure_populated(ROOT, fetch)
        assert fetch.calls == 3
        assert registry.contains(ROOT, "co@contoso.com")

    def test_custom_markers(self) -> None:
        registry = PrivilegedPrincipalRegistry(markers=["Owner"])
        registry.populate(
            ROOT, Fetch([_assignment("owner@contoso.com", "owner"), _assignment("co@contoso.com", "CoAdministrator")])
        )
        assert registry.contains(ROOT, "owner@contoso.com")
        assert not registry.contains(ROOT, "co@contoso.com")
