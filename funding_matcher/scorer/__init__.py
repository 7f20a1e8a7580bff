"""Rule-based qualification scorer for funding programs."""

from .engine import score_program
from .points import RULE_POINTS, RulePoints
from .rules import RULES, Rule

__all__ = [
    "score_program",
    "RULE_POINTS",
    "RulePoints",
    "RULES",
    "Rule",
]
