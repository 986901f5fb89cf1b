"""Unit tests for AssertionGate and the service entry points."""

from __future__ import annotations

import pytest

from azperm.application.permissions import (
    AssertionGate,
    EffectivePermissionEvaluator,
    assert_permissions,
    evaluate_permissions,
)
from azperm.kernel.errors import InsufficientPermissionError, NoOperationsError, ProviderError
from azperm.kernel.security import GrantSet, Operation
from azperm.testing.fakes import InMemoryAuthorizationProvider

SCOPE = "/subscriptions/S/resourceGroups/G/providers/Microsoft.Storage/storageAccounts/A"
ALICE = "alice@contoso.com"


@pytest.fixture()
def provider() -> InMemoryAuthorizationProvider:
    p = InMemoryAuthorizationProvider(principal=ALICE)
    p.add_role_definition("reader", GrantSet(actions=("*/read",)))
    p.assign("reader", SCOPE, ALICE)
    return p


@pytest.fixture()
def gate(provider: InMemoryAuthorizationProvider) -> AssertionGate:
    return AssertionGate(EffectivePermissionEvaluator(provider))


class TestAssertionGate:
    def test_passes_when_everything_granted(self, gate) -> None:
        assert gate.assert_permissions(SCOPE, [Operation("c/read")], ALICE) is None

    def test_two_missing_operations_in_one_error(self, gate) -> None:
        with pytest.raises(InsufficientPermissionError) as exc_info:
            gate.assert_permissions(SCOPE, [Operation("a/write"), Operation("c/read"), Operation("b/write")], ALICE)
        err = exc_info.value
        assert err.missing_operations == ["a/write", "b/write"]
        assert "a/write, b/write" in err.message
        assert err.principal == ALICE
        assert err.scope == SCOPE

    def test_reports_both_missing_names(self, provider) -> None:
        gate = AssertionGate(EffectivePermissionEvaluator(InMemoryAuthorizationProvider()))
        with pytest.raises(InsufficientPermissionError) as exc_info:
            gate(SCOPE, [Operation("a/read"), Operation("b/write")], ALICE)
        assert "a/read" in exc_info.value.message
        assert "b/write" in exc_info.value.message

    def test_signed_in_principal_named_when_omitted(self, gate) -> None:
        with pytest.raises(InsufficientPermissionError) as exc_info:
            gate(SCOPE, [Operation("a/write")])
        err = exc_info.value
        assert err.principal == ALICE
        assert f"Principal '{ALICE}'" in err.message

    def test_guest_principal_reported_canonically(self, gate) -> None:
        with pytest.raises(InsufficientPermissionError) as exc_info:
            gate(SCOPE, [Operation("a/write")], "alice_contoso.com#EXT#@tenant.onmicrosoft.com")
        assert exc_info.value.principal == ALICE

    def test_evaluation_errors_pass_through(self, provider, gate) -> None:
        with pytest.raises(NoOperationsError):
            gate(SCOPE, [], ALICE)
        provider.fail("fetch_role_assignments")
        with pytest.raises(ProviderError):
            gate(SCOPE, [Operation("c/read")], ALICE)


class TestServiceFunctions:
    def test_evaluate_permissions_accepts_names(self, provider) -> None:
        result = evaluate_permissions(provider, SCOPE, ["x/read", Operation("x/write")], ALICE)
        assert result == {"x/read": True, "x/write": False}
        assert type(result) is dict

    def test_catalog_resolves_data_actions(self, provider) -> None:
        blob_read = Operation("Microsoft.Storage/storageAccounts/blobServices/containers/blobs/read", is_data_action=True)
        provider.add_operation(blob_read)
        result = evaluate_permissions(provider, SCOPE, [blob_read.name], ALICE)
        assert result == {blob_read.name: False}
        assert provider.calls["fetch_operation"] == 1

    def test_assert_permissions_raises_for_missing(self, provider) -> None:
        with pytest.raises(InsufficientPermissionError) as exc_info:
            assert_permissions(provider, SCOPE, ["x/read", "x/write", "x/delete"], ALICE)
        assert exc_info.value.missing_operations == ["x/write", "x/delete"]

    def test_shared_evaluator_keeps_cache(self, provider) -> None:
        evaluator = EffectivePermissionEvaluator(provider)
        evaluate_permissions(provider, SCOPE, ["x/read"], ALICE, evaluator=evaluator)
        assert_permissions(provider, SCOPE, ["x/read"], ALICE, evaluator=evaluator)
        assert provider.calls["fetch_role_definition"] == 1
