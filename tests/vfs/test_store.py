#!/usr/bin/env python3
"""
Unit тесты для vfs/store.py
"""

import pytest

from vfs_workspace_mcp.vfs import (
    DirectoryNode,
    FileNode,
    VfsChangeKind,
    VfsErrorKind,
    VfsStore,
    tree_from_files,
)


@pytest.fixture
def store():
    """Создает VfsStore с небольшим проектом"""
    tree = tree_from_files(
        {
            "README.md": "# readme",
            "src/x.txt": "X",
            "src/nested/deep.txt": "deep",
            "dst/": "",
        }
    )
    return VfsStore(tree)


class TestReadWrite:
    """Тесты для read и write"""

    def test_read_file(self, store):
        assert store.read("/src/x.txt") == "X"

    def test_read_directory_is_not_found(self, store):
        assert store.read("/src") is None

    def test_read_missing(self, store):
        assert store.read("/missing.txt") is None

    def test_create_write_read_round_trip(self, store):
        store.create_directory("/a")
        assert store.create_file("/a/b.txt")
        assert store.write("/a/b.txt", "X")
        assert store.read("/a/b.txt") == "X"

    def test_write_creates_leaf(self, store):
        assert store.write("/src/new.txt", "new")
        assert store.read("/src/new.txt") == "new"

    def test_write_does_not_create_intermediate_directories(self, store):
        before = store.tree
        result = store.write("/no/such/dir/file.txt", "x")
        assert not result
        assert result.kind == VfsErrorKind.NOT_FOUND
        assert store.tree is before

    def test_write_to_directory_fails(self, store):
        result = store.write("/src", "x")
        assert not result
        assert result.kind == VfsErrorKind.INVALID_OPERATION
        assert store.is_directory("/src")

    def test_paths_are_canonicalized(self, store):
        assert store.read("src/../src/./x.txt") == "X"


class TestCreate:
    """Тесты для create_file и create_directory"""

    def test_create_file_is_empty(self, store):
        assert store.create_file("/empty.txt")
        assert store.read("/empty.txt") == ""

    def test_create_file_existing_fails(self, store):
        result = store.create_file("/README.md")
        assert not result
        assert result.kind == VfsErrorKind.ALREADY_EXISTS
        assert store.read("/README.md") == "# readme"

    def test_create_directory_twice(self, store):
        assert store.create_directory("/p")
        count = len(store.tree.children)
        tree_after_first = store.tree

        second = store.create_directory("/p")
        assert not second
        assert second.kind == VfsErrorKind.ALREADY_EXISTS
        assert len(store.tree.children) == count
        assert store.tree is tree_after_first

    def test_create_requires_parent(self, store):
        result = store.create_directory("/missing/child")
        assert result.kind == VfsErrorKind.NOT_FOUND
        assert not store.exists("/missing")

    def test_create_root_fails(self, store):
        assert store.create_directory("/").kind == VfsErrorKind.ALREADY_EXISTS

    def test_create_tree_grafts_whole_subtree(self, store):
        changes = []
        store.subscribe(changes.append)
        assert store.create_tree("dst/app", tree_from_files({"src/main.py": "print()", "docs/": ""}))
        assert store.read("/dst/app/src/main.py") == "print()"
        assert store.is_directory("/dst/app/docs")
        assert [(change.kind, change.path) for change in changes] == [(VfsChangeKind.CREATED, "/dst/app")]

    def test_create_tree_on_existing_path_changes_nothing(self, store):
        before = store.tree
        result = store.create_tree("/src", tree_from_files({"new.txt": "n"}))
        assert result.kind == VfsErrorKind.ALREADY_EXISTS
        assert store.tree is before


class TestDelete:
    """Тесты для delete"""

    def test_delete_cascades(self, store):
        assert store.delete("/src")
        assert store.find_node("/src") is None
        assert store.find_node("/src/nested/deep.txt") is None

    def test_delete_missing(self, store):
        result = store.delete("/missing")
        assert result.error == "No such file or directory: /missing"
        assert result.kind == VfsErrorKind.NOT_FOUND

    def test_delete_root_is_invalid(self, store):
        result = store.delete("/")
        assert result.kind == VfsErrorKind.INVALID_OPERATION
        assert store.exists("/README.md")

    def test_delete_deselects_nested_active_file(self, store):
        store.select("/src/nested/deep.txt")
        store.delete("/src/nested")
        assert store.active_file is None
        assert store.find_node("/src/nested") is None

    def test_delete_sibling_keeps_active_file(self, store):
        store.select("/src/x.txt")
        store.create_file("/src/x.txt.bak")
        store.delete("/src/x.txt.bak")
        assert store.active_file == "/src/x.txt"


class TestMove:
    """Тесты для move"""

    def test_move_preserves_content(self, store):
        assert store.move("/src/x.txt", "/renamed.txt")
        assert store.read("/renamed.txt") == "X"
        assert store.read("/src/x.txt") is None

    def test_move_into_directory(self, store):
        assert store.move("/src/x.txt", "/dst")
        assert store.read("/dst/x.txt") == "X"
        assert not store.exists("/src/x.txt")

    def test_move_into_root(self, store):
        assert store.move("/src/x.txt", "/")
        assert store.read("/x.txt") == "X"

    def test_move_missing_source(self, store):
        result = store.move("/missing", "/dst")
        assert result.error == "Source not found: /missing"

    def test_move_never_overwrites(self, store):
        store.write("/dst/x.txt", "other")
        before = store.tree
        result = store.move("/src/x.txt", "/dst")
        assert result.kind == VfsErrorKind.ALREADY_EXISTS
        assert result.error == "Destination exists: /dst/x.txt"
        assert store.tree is before

    def test_move_missing_destination_parent(self, store):
        result = store.move("/src/x.txt", "/nope/x.txt")
        assert result.error == "Cannot find destination parent for: /nope/x.txt"
        assert store.exists("/src/x.txt")

    def test_move_into_own_descendant_is_invalid(self, store):
        result = store.move("/src", "/src/nested")
        assert result.kind == VfsErrorKind.INVALID_OPERATION
        assert store.read("/src/nested/deep.txt") == "deep"

    def test_move_root_is_invalid(self, store):
        assert store.move("/", "/dst").kind == VfsErrorKind.INVALID_OPERATION

    def test_move_rewrites_active_file(self, store):
        store.select("/src/x.txt")
        store.move("/src/x.txt", "/dst")
        assert store.active_file == "/dst/x.txt"

    def test_move_rewrites_nested_active_file(self, store):
        store.select("/src/nested/deep.txt")
        store.move("/src", "/lib")
        assert store.active_file == "/lib/nested/deep.txt"
        assert store.read(store.active_file) == "deep"

    def test_move_prefix_sibling_keeps_active_file(self, store):
        store.write("/src2.txt", "s")
        store.select("/src2.txt")
        store.move("/src", "/lib")
        assert store.active_file == "/src2.txt"


class TestCopy:
    """Тесты для copy"""

    def test_copy_leaves_source(self, store):
        assert store.copy("/src", "/dst")
        assert store.read("/dst/src/nested/deep.txt") == "deep"
        assert store.read("/src/nested/deep.txt") == "deep"

    def test_copy_is_independent(self, store):
        store.copy("/src/x.txt", "/copy.txt")
        store.write("/copy.txt", "changed")
        assert store.read("/src/x.txt") == "X"

    def test_copy_conflict(self, store):
        result = store.copy("/src/x.txt", "/README.md")
        assert result.kind == VfsErrorKind.ALREADY_EXISTS

    def test_copy_into_itself_is_invalid(self, store):
        result = store.copy("/src", "/src/nested")
        assert result.kind == VfsErrorKind.INVALID_OPERATION
        assert not store.exists("/src/nested/src")

    def test_copy_does_not_touch_active_file(self, store):
        store.select("/src/x.txt")
        store.copy("/src/x.txt", "/dst")
        assert store.active_file == "/src/x.txt"


class TestRename:
    """Тесты для rename"""

    def test_rename(self, store):
        assert store.rename("/src/x.txt", "y.txt")
        assert store.read("/src/y.txt") == "X"

    def test_rename_same_name_is_noop(self, store):
        before = store.tree
        assert store.rename("/src/x.txt", "x.txt")
        assert store.tree is before

    def test_rename_onto_existing_directory_fails(self, store):
        result = store.rename("/README.md", "dst")
        assert result.kind == VfsErrorKind.ALREADY_EXISTS
        assert store.exists("/README.md")
        assert not store.exists("/dst/README.md")

    @pytest.mark.parametrize("name", ["", "a/b", "..", "."])
    def test_rename_invalid_name(self, store, name):
        assert store.rename("/src/x.txt", name).kind == VfsErrorKind.INVALID_OPERATION

    def test_rename_follows_active_file(self, store):
        store.select("/src/x.txt")
        store.rename("/src", "lib")
        assert store.active_file == "/lib/x.txt"


class TestReplaceAll:
    """Тесты для replace_all"""

    def test_selects_root_readme(self, store):
        store.replace_all(tree_from_files({"readme.txt": "r", "app.py": ""}))
        assert store.active_file == "/readme.txt"
        assert store.exists("/app.py")
        assert not store.exists("/src")

    def test_clears_without_readme(self, store):
        store.select("/README.md")
        store.replace_all(tree_from_files({"docs/README.md": "nested only"}))
        assert store.active_file is None

    def test_readme_directory_is_not_selected(self, store):
        store.replace_all(DirectoryNode(children={"README": DirectoryNode()}))
        assert store.active_file is None


class TestSnapshotsAndNotifications:
    """Тесты для снимков дерева и уведомлений"""

    def test_old_snapshot_survives_mutation(self, store):
        snapshot = store.tree
        store.write("/src/x.txt", "changed")
        store.delete("/README.md")
        assert snapshot.children["src"].children["x.txt"] == FileNode(content="X")
        assert "README.md" in snapshot.children

    def test_listeners_receive_changes(self, store):
        changes = []
        unsubscribe = store.subscribe(changes.append)

        store.write("/src/x.txt", "changed")
        store.create_file("/new.txt")
        store.move("/new.txt", "/dst")
        store.create_file("/README.md")  # rejected, no notification

        assert [change.kind for change in changes] == [
            VfsChangeKind.WRITTEN,
            VfsChangeKind.CREATED,
            VfsChangeKind.MOVED,
        ]
        assert changes[-1].destination == "/dst/new.txt"

        unsubscribe()
        store.delete("/dst")
        assert len(changes) == 3

    def test_listener_sees_updated_active_file(self, store):
        store.select("/src/x.txt")
        seen = []
        store.subscribe(lambda change: seen.append(store.active_file))
        store.move("/src/x.txt", "/dst")
        assert seen == ["/dst/x.txt"]

    def test_failing_listener_does_not_fail_applied_mutation(self, store):
        """Исключение подписчика не превращает выполненную операцию в ошибку"""
        received = []

        def broken(change):
            raise RuntimeError("listener is broken")

        store.subscribe(broken)
        store.subscribe(received.append)

        result = store.delete("/README.md")

        assert result
        assert not store.exists("/README.md")
        assert [change.kind for change in received] == [VfsChangeKind.DELETED]


class TestQueries:
    """Тесты для вспомогательных запросов"""

    def test_list_directory(self, store):
        assert store.list_directory("/") == ["README.md", "dst", "src"]
        assert store.list_directory("/README.md") is None

    def test_structure(self, store):
        assert store.structure("/src") == "- nested\n  - deep.txt\n- x.txt"

    def test_iter_files(self, store):
        assert dict(store.iter_files("/src")) == {"/src/nested/deep.txt": "deep", "/src/x.txt": "X"}
        assert list(store.iter_files("/missing")) == []

    def test_select_only_files(self, store):
        assert not store.select("/src")
        assert not store.select("/missing")
        assert store.select("src/x.txt")
        assert store.active_file == "/src/x.txt"
        store.close()
        assert store.active_file is None
