"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- Plain text rendering of demo output and pattern descriptions
- Rich tables for catalog listings and run summaries
- JSON and YAML dumps for scripting
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str, show_banner: bool = True) -> str:
    """
    Format data according to the specified format type.

    Args:
        data: Command result, a dict keyed by "patterns", "pattern" or "results"
        format_type: One of text, json, yaml, table
        show_banner: Print a header line before each demo in text format

    Returns:
        Formatted string ready to print
    """
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data, show_banner)


def format_text_output(data: Any, show_banner: bool = True) -> str:
    """Format data as plain text."""
    if isinstance(data, dict) and "results" in data:
        return format_results_text(data["results"], show_banner)
    elif isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_details(data["pattern"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "results" in data:
        return format_results_table(data["results"])
    elif isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "pattern" in data:
        return format_pattern_table(data["pattern"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_results_text(results: List[Dict], show_banner: bool = True) -> str:
    """Concatenate demo outputs, each optionally under a banner."""
    if not results:
        return "No demos were run."

    blocks = []
    for result in results:
        output = result.get("output", "").rstrip("\n")
        if show_banner:
            blocks.append(f"=== {result.get('pattern')} / {result.get('variant')} ===\n{output}")
        else:
            blocks.append(output)
    return "\n\n".join(blocks)


def format_patterns_list(patterns: List[Dict]) -> str:
    """One line per pattern: category, name and intent."""
    if not patterns:
        return "No patterns found."

    width = max(len(p.get("name", "")) for p in patterns)
    return "\n".join(
        f"{p.get('category', ''):<11} {p.get('name', ''):<{width}}  {p.get('intent', '')}"
        for p in patterns
    )


def format_pattern_details(pattern: Dict) -> str:
    """Format a pattern description as a detailed list."""
    lines = [
        f"{pattern.get('title')} ({pattern.get('category')})",
        "",
        f"Intent: {pattern.get('intent')}",
    ]
    applicability = pattern.get("applicability") or []
    if applicability:
        lines.append("Applicability:")
        lines.extend(f"  - {item}" for item in applicability)
    if pattern.get("identification"):
        lines.append(f"Identification: {pattern.get('identification')}")
    lines.append(f"Complexity: {pattern.get('complexity')}/3")
    lines.append(f"Popularity: {pattern.get('popularity')}/3")
    if pattern.get("reference_url"):
        lines.append(f"Reference: {pattern.get('reference_url')}")

    variants = pattern.get("variants") or []
    if variants:
        lines.append("Variants:")
        lines.extend(f"  {v.get('name')}: {v.get('description')}" for v in variants)
    return "\n".join(lines)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()


def format_patterns_table(patterns: List[Dict]) -> str:
    """Format patterns as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Name", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Intent")
    table.add_column("Complexity", style="yellow", justify="right")
    table.add_column("Popularity", style="yellow", justify="right")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("intent", "")),
            f"{pattern.get('complexity', 0)}/3",
            f"{pattern.get('popularity', 0)}/3",
        )
    return _render(table)


def format_pattern_table(pattern: Dict) -> str:
    """Format a single pattern as a two-column Rich table."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for key in ("name", "title", "category", "intent", "identification", "reference_url"):
        table.add_row(key, str(pattern.get(key, "")))
    table.add_row("applicability", "\n".join(pattern.get("applicability") or []))
    table.add_row("complexity", f"{pattern.get('complexity', 0)}/3")
    table.add_row("popularity", f"{pattern.get('popularity', 0)}/3")
    table.add_row(
        "variants",
        "\n".join(v.get("name", "") for v in pattern.get("variants") or []),
    )
    return _render(table)


def format_results_table(results: List[Dict]) -> str:
    """Summarize demo runs as a Rich table."""
    if not results:
        return "No demos were run."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Pattern", style="cyan")
    table.add_column("Variant", style="green")
    table.add_column("Lines", style="yellow", justify="right")
    table.add_column("Duration (ms)", style="yellow", justify="right")

    for result in results:
        table.add_row(
            str(result.get("pattern", "N/A")),
            str(result.get("variant", "N/A")),
            str(len(result.get("output", "").splitlines())),
            f"{float(result.get('duration_ms', 0.0)):.2f}",
        )
    return _render(table)
