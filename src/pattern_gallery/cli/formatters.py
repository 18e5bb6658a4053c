"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text output of demo lines
- JSON and YAML dumps of command results
- Rich tables for pattern listings and demo runs
- List formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, allow_unicode=True, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_text_output(data: Any) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"])
    elif isinstance(data, dict) and "patterns" in data:
        return format_patterns_text(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    else:
        return format_list_output(data)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_table([data["pattern"]])
    elif isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"])
    elif isinstance(data, dict):
        return "\n".join(_flatten(data))
    else:
        return json.dumps(data, indent=2, default=str)


def format_results_text(results: List[Dict]) -> str:
    """Format demo results as titled blocks of lines."""
    if not results:
        return "No demos were run."

    blocks = []
    for result in results:
        header = f"== {result.get('title', 'N/A')} ({result.get('category', 'N/A')}) =="
        blocks.append("\n".join([header] + list(result.get("lines", []))))
    return "\n\n".join(blocks)


def format_patterns_text(patterns: List[Dict]) -> str:
    """Format pattern metadata as aligned columns."""
    if not patterns:
        return "No patterns found."

    name_width = max(len(p.get("name", "")) for p in patterns)
    category_width = max(len(p.get("category", "")) for p in patterns)
    lines = []
    for pattern in patterns:
        lines.append(
            f"{pattern.get('name', ''):<{name_width}}  "
            f"{pattern.get('category', ''):<{category_width}}  "
            f"{pattern.get('summary', '')}"
        )
    return "\n".join(lines)


def format_patterns_list(patterns: List[Dict]) -> str:
    """Format pattern metadata as a detailed list."""
    if not patterns:
        return "No patterns found."

    entries = []
    for pattern in patterns:
        entries.append(
            "\n".join(
                [
                    f"Name:     {pattern.get('name', 'N/A')}",
                    f"Title:    {pattern.get('title', 'N/A')}",
                    f"Category: {pattern.get('category', 'N/A')}",
                    f"Summary:  {pattern.get('summary', 'N/A')}",
                ]
            )
        )
    return "\n\n".join(entries)


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format pattern metadata as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Title", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("title", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("summary", "")),
        )
    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Format demo results as a Rich table, one row per output line."""
    if not results:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Pattern", style="cyan", no_wrap=True)
    table.add_column("Output")

    for result in results:
        table.add_row(str(result.get("title", "N/A")), "\n".join(result.get("lines", [])))
    return _render(table)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def _flatten(data: Dict[str, Any], prefix: str = "") -> List[str]:
    lines = []
    for key, value in data.items():
        full_key = f"{prefix}{key}"
        if isinstance(value, dict):
            lines.extend(_flatten(value, f"{full_key}."))
        else:
            lines.append(f"{full_key}: {value}")
    return lines
