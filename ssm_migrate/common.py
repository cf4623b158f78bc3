"""
Common utilities for ssm-migrate.

Output formatting shared by the copy orchestrator and the CLI.
"""

from typing import Dict

MASKED_VALUE = "****"


def format_parameter(name: str, value: str, param_type: str, description: str) -> str:
    """
    Format a parameter for the progress trace.

    SecureString values are masked so secrets don't end up in terminal logs.

    Args:
        name: Parameter name
        value: Parameter value
        param_type: Parameter type
        description: Parameter description

    Returns:
        Formatted single-line string
    """
    shown = MASKED_VALUE if param_type == "SecureString" else value
    return f"name: {name}, value: {shown}, type: {param_type}, description: {description}"


def format_migration_summary(summary: Dict) -> str:
    """
    Format a migration summary message.

    Args:
        summary: Dict with total_pairs and copied counts

    Returns:
        Formatted summary string
    """
    total = summary.get('total_pairs', 0)
    if total == 0:
        return "No parameters to migrate."
    return f"Copied {summary.get('copied', 0)} of {total} parameters"
