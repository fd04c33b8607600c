# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, Iterable

from taskrecorder import TaskManager, TaskPersistence
from taskrecorder.cli import main, run_shell


def _scripted(lines: Iterable[str]) -> Callable[[str], str]:
    it = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_no_command_prints_help(capsys) -> None:
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()


def test_add_list_show_delete(tasks_path: Path, capsys) -> None:
    f = str(tasks_path)
    assert main(["add", "--file", f, "Buy milk", "2%  whole"]) == 0
    assert main(["add", "--file", f, "Pay bills", "due Friday\nmulti-line"]) == 0
    capsys.readouterr()

    assert main(["list", "--file", f]) == 0
    out = capsys.readouterr().out
    assert "1. Buy milk" in out
    assert "2. Pay bills" in out

    assert main(["show", "--file", f, "2"]) == 0
    assert "due Friday\nmulti-line" in capsys.readouterr().out

    assert main(["delete", "--file", f, "1"]) == 0
    capsys.readouterr()
    assert [t.title for t in TaskPersistence().load(tasks_path)] == ["Pay bills"]


def test_list_json(tasks_path: Path, capsys) -> None:
    main(["add", "--file", str(tasks_path), "a", "b"])
    capsys.readouterr()

    assert main(["list", "--file", str(tasks_path), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["tasks"] == [{"title": "a", "description": "b"}]


def test_errors_return_1(tasks_path: Path, capsys) -> None:
    f = str(tasks_path)
    assert main(["add", "--file", f, " ", "desc"]) == 1
    assert "required" in capsys.readouterr().out
    assert not tasks_path.exists()

    assert main(["show", "--file", f, "1"]) == 1
    assert main(["delete", "--file", f, "0"]) == 1
    assert "No task 0" in capsys.readouterr().out


def test_corrupt_file_is_reported_and_not_overwritten(tasks_path: Path, capsys) -> None:
    tasks_path.write_bytes(b"garbage")
    assert main(["add", "--file", str(tasks_path), "a", "b"]) == 1
    assert "Error loading tasks" in capsys.readouterr().out
    assert tasks_path.read_bytes() == b"garbage"


def test_shell_session(tasks_path: Path, capsys) -> None:
    manager = TaskManager(persistence=TaskPersistence(default_path=tasks_path))
    script = [
        "help",
        "new",
        "add", "Pay bills", "due Friday", "multi-line", "",
        "add", "", "nothing", "",
        "show 1",
        "show 9",
        "delete x",
        "bogus",
        "save",
        "delete 1",
        "list",
        "load",
        "exit",
    ]
    assert run_shell(manager, read=_scripted(script)) == 0

    out = capsys.readouterr().out
    assert "Ready for a new task (title='')" in out
    assert "Task added: Pay bills" in out
    assert "Both title and description are required!" in out
    assert "due Friday\nmulti-line" in out
    assert "No task 9" in out
    assert "Usage: delete N" in out
    assert "Unknown command: bogus" in out
    assert "Tasks saved successfully!" in out
    assert "Tasks loaded successfully!" in out
    assert manager.list_titles() == ["Pay bills"]


def test_shell_ends_on_eof(manager: TaskManager) -> None:
    assert run_shell(manager, read=_scripted([])) == 0


def test_shell_rejects_non_numeric_task_numbers(manager: TaskManager, capsys) -> None:
    manager.add_task("keep", "me")
    script = ["delete ²", "show ²", "delete one", "show", "delete 2", "exit"]
    assert run_shell(manager, read=_scripted(script)) == 0

    out = capsys.readouterr().out
    assert "Usage: delete N" in out
    assert "Usage: show N" in out
    assert "No task 2" in out
    assert manager.list_titles() == ["keep"]


def test_shell_input_ending_mid_add_cancels_it(manager: TaskManager, capsys) -> None:
    assert run_shell(manager, read=_scripted(["add", "title", "desc line"])) == 0
    assert "Add cancelled" in capsys.readouterr().out
    assert manager.list_titles() == []

    assert run_shell(manager, read=_scripted(["add"])) == 0
    assert manager.list_titles() == []


def test_list_json_is_a_loadable_snapshot(tasks_path: Path, tmp_path: Path, capsys) -> None:
    main(["add", "--file", str(tasks_path), "Pay bills", "due Friday\nmulti-line"])
    capsys.readouterr()

    main(["list", "--file", str(tasks_path), "--json"])
    dumped = tmp_path / "dumped.dat"
    dumped.write_text(capsys.readouterr().out, "utf-8")

    assert TaskPersistence().load(dumped) == TaskPersistence().load(tasks_path)
