"""Unit tests for canonical path helpers."""

from __future__ import annotations

import pytest

from core.paths import base_name, canonical_path, join_mount, parent_path


@pytest.mark.parametrize(
    "spelling",
    ["/defs.json", "defs.json", "//defs.json", "/./defs.json", "/nested/../defs.json", "/defs.json/."],
)
def test_canonical_path_resolves_equivalent_spellings(spelling: str) -> None:
    """Redundant separators and relative segments should collapse."""
    assert canonical_path(spelling) == "/defs.json"


def test_canonical_path_never_climbs_above_root() -> None:
    assert canonical_path("/../../defs.json") == "/defs.json"


def test_canonical_path_of_empty_is_root() -> None:
    assert canonical_path("") == "/"


def test_base_name_of_root_is_root() -> None:
    assert base_name("/") == "/"


def test_parent_path_of_top_level_entry_is_root() -> None:
    assert parent_path("/defs.json") == "/"


@pytest.mark.parametrize("mount_name", ["schemas", "/schemas", "/schemas/"])
def test_join_mount_inserts_single_separator(mount_name: str) -> None:
    """Mount prefixes should rewrite caller paths onto the subtree."""
    assert join_mount(mount_name, "/item.json") == "/schemas/item.json"


def test_join_mount_without_prefix_is_canonical_path() -> None:
    assert join_mount("", "a//b/./c") == "/a/b/c"
