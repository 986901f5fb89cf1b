"""Unit tests for operation resolution."""

from __future__ import annotations

import pytest

from azperm.application.permissions import resolve_operations
from azperm.kernel.errors import ValidationError
from azperm.kernel.security import Operation

BLOB_READ = Operation("Microsoft.Storage/storageAccounts/blobServices/containers/blobs/read", is_data_action=True)


class TestResolveOperations:
    def test_names_become_control_plane_operations(self) -> None:
        assert resolve_operations(["a/read", "b/write"]) == (Operation("a/read"), Operation("b/write"))

    def test_operation_objects_kept(self) -> None:
        assert resolve_operations([BLOB_READ]) == (BLOB_READ,)

    def test_lookup_resolves_names(self) -> None:
        catalog = {BLOB_READ.name: BLOB_READ}
        assert resolve_operations([BLOB_READ.name, "a/read"], catalog.get) == (BLOB_READ, Operation("a/read"))

    def test_duplicates_keep_first(self) -> None:
        result = resolve_operations([BLOB_READ, BLOB_READ.name, "a/read", " a/read "])
        assert result == (BLOB_READ, Operation("a/read"))

    def test_empty_input_gives_empty_tuple(self) -> None:
        assert resolve_operations([]) == ()

    @pytest.mark.parametrize("item", ["", "   ", None, 3])
    def test_invalid_items_rejected(self, item: object) -> None:
        with pytest.raises(ValidationError):
            resolve_operations([item])  # type: ignore[list-item]
