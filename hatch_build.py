"""Hatchling hook that records the git commit tin was built from."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

from hatchling.builders.hooks.plugin.interface import BuildHookInterface

BUILD_INFO = "tin/_build_info.py"


class CustomBuildHook(BuildHookInterface):
    """Writes tin/_build_info.py for tin.version to read when git is absent."""

    def initialize(self, version: str, build_data: dict[str, Any]) -> None:
        root = Path(self.root)
        info = {
            "COMMIT": _git(root, "rev-parse", "HEAD"),
            "DATE": _git(root, "show", "-s", "--format=%cI", "HEAD"),
        }
        lines = ["# Generated by hatch_build.py; do not edit."]
        lines += [f"{name} = {value!r}" for name, value in info.items()]
        (root / BUILD_INFO).write_text("\n".join(lines) + "\n", encoding="utf-8")
        build_data.setdefault("artifacts", []).append(BUILD_INFO)


def _git(root: Path, *args: str) -> str | None:
    try:
        out = subprocess.check_output(["git", *args], cwd=str(root), stderr=subprocess.DEVNULL)
    except (subprocess.CalledProcessError, OSError):
        return None
    return out.decode().strip() or None
