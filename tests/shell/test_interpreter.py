#!/usr/bin/env python3
"""
Unit тесты для shell/interpreter.py
"""

import pytest

from vfs_workspace_mcp.shell import CommandInterpreter
from vfs_workspace_mcp.vfs import VfsStore, tree_from_files


@pytest.fixture
def store():
    """Создает VfsStore только с README.md"""
    return VfsStore(tree_from_files({"README.md": "# readme"}))


@pytest.fixture
def shell(store):
    """Создает CommandInterpreter поверх store"""
    return CommandInterpreter(store)


class TestShellScenario:
    """Сквозной сценарий работы с терминалом"""

    def test_mkdir_touch_mv_rm(self, shell):
        assert shell.execute("mkdir app") == ""
        assert shell.execute("touch app/index.js") == ""
        assert shell.execute("cat app/index.js") == ""
        assert shell.execute("mv app lib") == ""
        assert shell.execute("ls .") == "README.md\nlib/"
        assert shell.execute("cat lib/index.js") == ""
        assert shell.execute("rm lib") == ""
        assert shell.execute("ls .") == "README.md"


class TestShellCommands:
    """Тесты для отдельных команд"""

    def test_empty_line(self, shell):
        assert shell.execute("   ") == ""

    def test_ls_defaults_to_cwd_and_sorts(self, shell, store):
        store.write("/b.txt", "")
        store.create_directory("/a")
        assert shell.execute("ls") == "README.md\na/\nb.txt"

    def test_ls_missing(self, shell):
        assert shell.execute("ls nope") == "ls: cannot access 'nope': No such file or directory"

    def test_ls_on_file(self, shell):
        assert shell.execute("ls README.md") == "ls: cannot access 'README.md': No such file or directory"

    def test_ls_color(self, store):
        store.create_directory("/src")
        shell = CommandInterpreter(store, color=True)
        assert shell.execute("ls") == "README.md\n\x1b[1;34msrc/\x1b[0m"

    def test_cd_and_pwd(self, shell, store):
        store.create_directory("/src")
        store.create_directory("/src/lib")
        assert shell.execute("pwd") == "/"
        assert shell.execute("cd src/lib") == ""
        assert shell.execute("pwd") == "/src/lib"
        assert shell.execute("cd ..") == ""
        assert shell.execute("pwd") == "/src"
        assert shell.execute("cd .") == ""
        assert shell.execute("pwd") == "/src"

    def test_cd_without_argument_is_noop(self, shell):
        assert shell.execute("cd") == ""
        assert shell.cwd == "/"

    def test_cd_errors(self, shell):
        assert shell.execute("cd nope") == "cd: no such file or directory: nope"
        assert shell.execute("cd README.md") == "cd: no such file or directory: README.md"
        assert shell.cwd == "/"

    def test_relative_paths_use_cwd(self, shell, store):
        store.create_directory("/src")
        shell.execute("cd src")
        shell.execute("touch main.py")
        assert store.is_file("/src/main.py")
        assert shell.execute("cat ../README.md") == "# readme"

    def test_cat_errors(self, shell, store):
        store.create_directory("/src")
        assert shell.execute("cat") == "cat: missing operand"
        assert shell.execute("cat src") == "cat: src: Is a directory"
        assert shell.execute("cat nope") == "cat: nope: No such file or directory"

    def test_touch_existing_is_noop(self, shell, store):
        store.write("/README.md", "kept")
        assert shell.execute("touch README.md") == ""
        assert store.read("/README.md") == "kept"

    def test_touch_errors(self, shell):
        assert shell.execute("touch") == "touch: missing file operand"
        assert shell.execute("touch nope/a.txt") == "touch: cannot create file 'nope/a.txt'"

    def test_mkdir_errors(self, shell):
        assert shell.execute("mkdir") == "mkdir: missing operand"
        assert shell.execute("mkdir README.md") == "mkdir: cannot create directory 'README.md': File exists"
        assert shell.execute("mkdir a/b") == "mkdir: failed to create directory 'a/b'"

    def test_rm_errors(self, shell):
        assert shell.execute("rm") == "rm: missing operand"
        assert shell.execute("rm nope") == "No such file or directory: /nope"
        assert shell.execute("rm /") == "Cannot delete the root directory"

    def test_mv_and_cp(self, shell, store):
        store.create_directory("/dst")
        assert shell.execute("mv") == "mv: missing destination file operand"
        assert shell.execute("mv README.md") == "mv: missing destination file operand"
        assert shell.execute("cp README.md") == "cp: missing destination file operand"
        assert shell.execute("cp README.md dst") == ""
        assert store.read("/dst/README.md") == "# readme"
        assert shell.execute("mv README.md dst") == "Destination exists: /dst/README.md"
        assert shell.execute("mv nope dst") == "Source not found: /nope"
        assert shell.execute("cp nope dst") == "Source not found: /nope"

    def test_echo_collapses_whitespace(self, shell):
        assert shell.execute("echo  hello    world ") == "hello world"
        assert shell.execute("echo") == ""

    def test_echo_has_no_redirection(self, shell, store):
        assert shell.execute("echo hi > out.txt") == "hi > out.txt"
        assert not store.exists("/out.txt")

    def test_clear_calls_host(self, store):
        cleared = []
        shell = CommandInterpreter(store, on_clear=lambda: cleared.append(True))
        assert shell.execute("clear") == ""
        assert cleared == [True]

    def test_help(self, shell):
        output = shell.execute("help")
        assert "Commands: ls, cd, pwd" in output

    def test_unknown_command(self, shell):
        assert shell.execute("vim file.txt") == "vsh: command not found: vim"

    def test_history_is_recorded(self, shell):
        shell.execute("pwd")
        shell.execute("")
        shell.execute("ls")
        assert shell.history.entries == ["pwd", "ls"]

    def test_run_for_agent(self, shell):
        assert shell.run_for_agent("mkdir x") == "Command executed successfully."
        assert shell.run_for_agent("pwd") == "/"
