#!/usr/bin/env python3
"""
TASK RECORDER - CLI Interface
=============================
Command-line front end for recording tasks.

Usage:
    taskrecorder add "Buy milk" "2%  whole"
    taskrecorder list
    taskrecorder show 1
    taskrecorder delete 1
    taskrecorder shell --file ~/tasks.dat

Task numbers on the command line are 1-based.
"""

import argparse
import json
import logging
import sys
from typing import Callable, List, Optional, Union

from .manager import TaskManager
from .persistence import DEFAULT_TASKS_FILE, TaskPersistence
from .schema import TaskDraft, TaskRecord, TaskSnapshot

logger = logging.getLogger("taskrecorder.cli")

SHELL_HELP = """Commands:
  add            Add a task (prompts for title and description)
  delete N       Delete task N
  show N         Show task N
  list           List task titles
  new            Clear the current selection
  save [PATH]    Save tasks (default: the --file path)
  load [PATH]    Load tasks, replacing the current list
  help           Show this help
  exit           Leave without saving"""


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def _print_task(number: int, task: Union[TaskRecord, TaskDraft]) -> None:
    print(f"[{number}] {task.title}")
    print("-" * 60)
    print(task.description)


def _open_manager(path: str) -> Optional[TaskManager]:
    """Manager over the tasks in path; a missing file means an empty list"""
    manager = TaskManager(persistence=TaskPersistence(default_path=path))
    if not manager.persistence.default_path.exists():
        logger.debug(f"No task file at {path}, starting empty")
        return manager

    result = manager.load_tasks()
    if not result.ok:
        print(f"❌ {result.message}")
        return None
    return manager


# ========================================
# INTERACTIVE SHELL
# ========================================

def _read_description(read: Callable[[str], str]) -> str:
    print("Description (finish with an empty line):")
    lines: List[str] = []
    while True:
        line = read("")
        if not line:
            break
        lines.append(line)
    return "\n".join(lines)


def _parse_number(arg: str) -> Optional[int]:
    try:
        return int(arg)
    except ValueError:
        return None


def run_shell(manager: TaskManager, read: Callable[[str], str] = input) -> int:
    """Interactive loop over one in-memory list; nothing is saved implicitly"""
    print(manager.get_status_report())
    print("Type 'help' for commands.")

    while True:
        try:
            line = read("\ntasks> ").strip()
        except EOFError:
            print()
            return 0
        if not line:
            continue

        command, _, arg = line.partition(" ")
        command = command.lower()
        arg = arg.strip()

        if command in ("exit", "quit"):
            return 0

        if command == "help":
            print(SHELL_HELP)

        elif command == "list":
            print(manager.get_status_report())

        elif command == "new":
            draft = manager.compose_new()
            print(f"Ready for a new task (title={draft.title!r})")

        elif command == "add":
            try:
                title = read("Title: ")
                description = _read_description(read)
            except EOFError:
                print("\nAdd cancelled")
                return 0
            result = manager.add_task(title, description)
            print(f"✅ {result.message}" if result.ok else f"❌ {result.message}")

        elif command in ("show", "delete"):
            number = _parse_number(arg)
            if number is None:
                print(f"❌ Usage: {command} N")
                continue
            if command == "show":
                draft = manager.preview_existing(number - 1)
                if draft is None:
                    print(f"❌ No task {number}")
                else:
                    _print_task(number, draft)
            else:
                result = manager.delete_task(number - 1)
                print(f"🗑️ {result.message}" if result.ok else f"❌ No task {number}")

        elif command in ("save", "load"):
            path = arg or None
            if command == "save":
                result = manager.save_tasks(path)
            else:
                result = manager.load_tasks(path)
            print(f"✅ {result.message}" if result.ok else f"❌ {result.message}")
            if command == "load" and result.ok:
                print(manager.get_status_report())

        else:
            print(f"❌ Unknown command: {command} (type 'help')")


# ========================================
# ENTRY POINT
# ========================================

def main(argv: Optional[List[str]] = None) -> int:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--file", default=DEFAULT_TASKS_FILE, help="Task file")
    common.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    parser = argparse.ArgumentParser(
        prog="taskrecorder",
        description="Task Recorder - record tasks with a title and description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  taskrecorder add "Pay bills" "due Friday"   Add a task and save
  taskrecorder list                          List task titles
  taskrecorder list --json                   Print the tasks as a JSON snapshot
  taskrecorder show 2                        Show title and description
  taskrecorder delete 2                      Delete task 2 and save
  taskrecorder shell                         Interactive session
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # ADD command
    add_parser = subparsers.add_parser("add", parents=[common], help="Add a task")
    add_parser.add_argument("title", help="Task title")
    add_parser.add_argument("description", help="Task description")

    # DELETE command
    delete_parser = subparsers.add_parser("delete", parents=[common], help="Delete a task")
    delete_parser.add_argument("number", type=int, help="Task number (1-based)")

    # SHOW command
    show_parser = subparsers.add_parser("show", parents=[common], help="Show a task")
    show_parser.add_argument("number", type=int, help="Task number (1-based)")

    # LIST command
    list_parser = subparsers.add_parser("list", parents=[common], help="List tasks")
    list_parser.add_argument("--json", action="store_true", help="Output as a JSON snapshot")

    # SHELL command
    subparsers.add_parser("shell", parents=[common], help="Interactive session")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    _setup_logging(args.verbose)

    manager = _open_manager(args.file)
    if manager is None:
        return 1

    # Execute command
    if args.command == "add":
        result = manager.add_task(args.title, args.description)
        if not result.ok:
            print(f"❌ {result.message}")
            return 1
        saved = manager.save_tasks()
        if not saved.ok:
            print(f"❌ {saved.message}")
            return 1
        print(f"✅ {result.message}")
        print(f"   Tasks: {len(manager.store)}")
        print(f"   File: {args.file}")

    elif args.command == "delete":
        result = manager.delete_task(args.number - 1)
        if not result.ok:
            print(f"❌ No task {args.number}")
            return 1
        saved = manager.save_tasks()
        if not saved.ok:
            print(f"❌ {saved.message}")
            return 1
        print(f"🗑️ {result.message}")

    elif args.command == "show":
        task = manager.select_task(args.number - 1)
        if task is None:
            print(f"❌ No task {args.number}")
            return 1
        _print_task(args.number, task)

    elif args.command == "list":
        if args.json:
            snapshot = TaskSnapshot(tasks=list(manager.store.all()))
            print(json.dumps(snapshot.model_dump(mode="json"), indent=2, ensure_ascii=False))
        else:
            print(manager.get_status_report())

    elif args.command == "shell":
        return run_shell(manager)

    return 0


if __name__ == "__main__":
    sys.exit(main())
