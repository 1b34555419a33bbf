"""Pagescope findings package."""

from recommendations.engine import generate_action_items, generate_findings
from recommendations.rules import ALL_RULES, Rule

__all__ = [
    "generate_action_items",
    "generate_findings",
    "ALL_RULES",
    "Rule",
]
