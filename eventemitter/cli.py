"""Command line helpers for inspecting event emitters."""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from pathlib import Path

from rich.console import Console

from .config import EmitterConfig
from .diagnostics.checklist import run_checklist as checklist_run
from .diagnostics.inspector import print_listener_table
from .emitter import EventEmitter
from .validators import validate_emitter

logger = logging.getLogger(__name__)


def run_checklist() -> None:
    parser = argparse.ArgumentParser(description="Event emitter leak checks")
    parser.add_argument("module", help="Python module with register(emitter) function")
    args = parser.parse_args()

    emitter = _build_emitter(args.module)
    issues = checklist_run(emitter)
    if not issues:
        print("No issues found.")
        return
    for issue in issues:
        print(f"[{issue.severity.upper()}] {issue.message}")
    if any(issue.severity == "error" for issue in issues):
        sys.exit(1)


def run_inspect() -> None:
    parser = argparse.ArgumentParser(description="Print listeners registered on an emitter")
    parser.add_argument("module", help="Python module with register(emitter) function")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    args = parser.parse_args()

    emitter = _build_emitter(args.module)
    print_listener_table(emitter, Console(no_color=args.no_color))


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="Event emitter registry validator")
    parser.add_argument("module", help="Python module with register(emitter) function")
    args = parser.parse_args()

    emitter = _build_emitter(args.module)
    errors = validate_emitter(emitter)
    if errors:
        print("Registry errors:")
        for err in errors:
            print(f"- {err}")
        sys.exit(1)
    print("Registry is consistent.")


def _build_emitter(path: str) -> EventEmitter:
    emitter = EventEmitter(EmitterConfig.from_env())
    _load_module(path, emitter)
    return emitter


def _load_module(path: str, emitter: EventEmitter) -> None:
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    module = importlib.import_module(path)
    if not hasattr(module, "register"):
        raise RuntimeError(f"Module {path} has no register(emitter) function.")
    logger.debug("Registering listeners from %s", path)
    module.register(emitter)
