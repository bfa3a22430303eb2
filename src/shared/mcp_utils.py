"""Helpers for loading MCP server instructions and tool descriptions from disk."""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml


def load_instructions(directory: Path) -> str:
    """Load instructions.md from the given directory."""
    return (directory / "instructions.md").read_text().strip()


def load_tool_descriptions(
    directory: Path,
    required_tools: Iterable[str] = (),
) -> dict[str, Any]:
    """
    Load tool descriptions from tools.yaml.

    YAML block scalars leave trailing newlines on descriptions; those are
    stripped for the tool and each of its parameters.

    Raises:
        ValueError: If a tool listed in `required_tools` has no entry or no description.
    """
    with (directory / "tools.yaml").open() as f:
        data = yaml.safe_load(f) or {}
    for tool in data.values():
        if isinstance(tool.get("description"), str):
            tool["description"] = tool["description"].strip()
        params = tool.setdefault("parameters", {})
        for key in params:
            if isinstance(params[key], str):
                params[key] = params[key].strip()

    missing = [name for name in required_tools if not data.get(name, {}).get("description")]
    if missing:
        raise ValueError(f"tools.yaml is missing descriptions for: {', '.join(missing)}")
    return data
