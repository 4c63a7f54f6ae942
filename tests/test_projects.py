# Tests for Claude project key resolution and list upkeep
import os
from pathlib import Path

import pytest

from mcpconf.projects import (
    current_membership,
    drop_membership,
    merge_legacy_lists,
    new_project_node,
    resolve_project_key,
    set_membership,
)


class TestResolveProjectKey:
    """Tests for resolve_project_key function."""

    def test_exact_key(self, tmp_path: Path) -> None:
        key = str(tmp_path)
        assert resolve_project_key({key: {}}, key) == key

    def test_no_projects_returns_desired(self) -> None:
        assert resolve_project_key(None, "/tmp/new") == "/tmp/new"
        assert resolve_project_key({}, "/tmp/new") == "/tmp/new"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_symlink_alias_resolves_to_existing_key(self, tmp_path: Path) -> None:
        """Test that a symlinked path maps onto the real-path key."""
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        projects = {str(real.resolve()): {"mcpServers": {}}}
        assert resolve_project_key(projects, str(link)) == str(real.resolve())

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")
    def test_existing_key_may_be_the_symlink(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        projects = {str(link): {}}
        assert resolve_project_key(projects, str(real)) == str(link)

    def test_unresolvable_keys_are_skipped(self, tmp_path: Path) -> None:
        """Test that stale keys don't break the lookup."""
        target = tmp_path / "proj"
        target.mkdir()
        (tmp_path / "sub").mkdir()
        projects = {
            str(tmp_path / "gone"): {},
            str(target): {},
        }
        desired = str(tmp_path / "sub" / ".." / "proj")
        assert resolve_project_key(projects, desired) == str(target)

    def test_unknown_path_returns_desired(self, tmp_path: Path) -> None:
        other = tmp_path / "other"
        other.mkdir()
        desired = tmp_path / "mine"
        desired.mkdir()
        assert resolve_project_key({str(other): {}}, str(desired)) == str(desired)

    def test_nonexistent_desired_returns_desired(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "missing")
        assert resolve_project_key({str(tmp_path): {}}, missing) == missing


class TestMembership:
    """Tests for the enabled/disabled list helpers."""

    def test_new_project_node_shape(self) -> None:
        node = new_project_node()
        assert node == {
            "allowedTools": [],
            "mcpContextUris": [],
            "mcpServers": {},
            "enabledMcpServers": [],
            "disabledMcpServers": [],
        }

    def test_set_membership_moves_between_lists(self) -> None:
        node = {"enabledMcpServers": ["abap"], "disabledMcpServers": []}
        set_membership(node, "abap", disabled=True)
        assert node["enabledMcpServers"] == []
        assert node["disabledMcpServers"] == ["abap"]

        set_membership(node, "abap", disabled=False)
        assert node["enabledMcpServers"] == ["abap"]
        assert node["disabledMcpServers"] == []

    def test_set_membership_removes_duplicates_from_opposite(self) -> None:
        node = {"enabledMcpServers": ["abap", "abap"], "disabledMcpServers": []}
        set_membership(node, "abap", disabled=True)
        assert "abap" not in node["enabledMcpServers"]
        assert node["disabledMcpServers"] == ["abap"]

    def test_set_membership_is_idempotent(self) -> None:
        node = {"enabledMcpServers": [], "disabledMcpServers": ["abap"]}
        set_membership(node, "abap", disabled=True)
        assert node["disabledMcpServers"] == ["abap"]

    def test_legacy_lists_are_folded_in_and_kept(self) -> None:
        """Test that legacy lists are read into canonical ones but left in place."""
        node = {
            "enabledMcpjsonServers": ["old"],
            "disabledMcpjsonServers": ["older"],
        }
        merge_legacy_lists(node)
        assert node["enabledMcpServers"] == ["old"]
        assert node["disabledMcpServers"] == ["older"]
        assert node["enabledMcpjsonServers"] == ["old"]
        assert node["disabledMcpjsonServers"] == ["older"]

    def test_legacy_merge_does_not_duplicate(self) -> None:
        node = {"enabledMcpServers": ["old"], "enabledMcpjsonServers": ["old"]}
        merge_legacy_lists(node)
        assert node["enabledMcpServers"] == ["old"]

    def test_toggle_of_legacy_enabled_server(self) -> None:
        node = {"enabledMcpjsonServers": ["abap"]}
        set_membership(node, "abap", disabled=True)
        assert node["enabledMcpServers"] == []
        assert node["disabledMcpServers"] == ["abap"]

    def test_drop_membership(self) -> None:
        node = {"enabledMcpServers": ["abap", "x"], "disabledMcpServers": ["abap"]}
        drop_membership(node, "abap")
        assert node["enabledMcpServers"] == ["x"]
        assert node["disabledMcpServers"] == []

    def test_legacy_name_stays_in_one_list_after_later_toggles(self) -> None:
        """Test that a re-enabled legacy name isn't folded back into the disabled list."""
        node = {"disabledMcpjsonServers": ["x"]}
        set_membership(node, "x", disabled=False)
        set_membership(node, "y", disabled=True)

        assert node["enabledMcpServers"] == ["x"]
        assert node["disabledMcpServers"] == ["y"]
        assert node["disabledMcpjsonServers"] == ["x"]

    def test_name_in_both_legacy_lists_lands_once(self) -> None:
        node = {"enabledMcpjsonServers": ["x"], "disabledMcpjsonServers": ["x"]}
        merge_legacy_lists(node)
        assert node["enabledMcpServers"] == ["x"]
        assert node["disabledMcpServers"] == []

    def test_current_membership(self) -> None:
        node = {"enabledMcpServers": ["a"], "disabledMcpjsonServers": ["b"]}
        assert current_membership(node, "a") is False
        assert current_membership(node, "b") is True
        assert current_membership(node, "c") is None
