"""
Rule-based category resolution.

Rules are indexed by canonical column name. For a row, columns are visited
in the row's own order; for each column its rules are tried in declaration
order and, inside a rule, its patterns in declaration order. The first
pattern that fully matches (case-insensitively) decides the category and
evaluation stops.
"""

# csv_categorizer/controllers/category_matcher.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from csv_categorizer.data_model import CategoryRule, Row
from csv_categorizer.exceptions import ConfigurationError
from csv_categorizer.utilities import safe_cell

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledRule:
    rule: CategoryRule
    patterns: Tuple[re.Pattern[str], ...]

    @property
    def category(self) -> str:
        return self.rule.category

    def fires(self, cell_value: str) -> Optional[re.Pattern[str]]:
        """Return the first pattern that fully matches ``cell_value``."""
        for pattern in self.patterns:
            if pattern.fullmatch(cell_value) is not None:
                return pattern
        return None


RuleIndex = Dict[str, List[CompiledRule]]


def compile_rule(rule: CategoryRule) -> CompiledRule:
    """Compile every pattern of ``rule``; a bad pattern is a ConfigurationError."""
    patterns: List[re.Pattern[str]] = []
    for regex in rule.regexes:
        try:
            patterns.append(re.compile(regex, re.IGNORECASE))
        except (re.error, TypeError) as e:
            raise ConfigurationError(
                f"Invalid regex {regex!r} for category {rule.category!r} "
                f"on column {rule.column_name!r}: {e}",
                {"regex": regex, "category": rule.category, "column": rule.column_name},
            ) from e
    return CompiledRule(rule=rule, patterns=tuple(patterns))


def build_rule_index(rules: Iterable[CategoryRule]) -> RuleIndex:
    """Group compiled rules by column, keeping declaration order within a column."""
    index: RuleIndex = {}
    for rule in rules:
        index.setdefault(rule.column_name, []).append(compile_rule(rule))
    return index


def resolve_category(row: Mapping[str, Optional[str]], rule_index: RuleIndex) -> Optional[str]:
    """First category whose rule fires for ``row``, or None."""
    for column_name, raw_value in row.items():
        rules = rule_index.get(column_name)
        if not rules:
            continue
        cell_value = safe_cell(raw_value)
        for compiled in rules:
            pattern = compiled.fires(cell_value)
            if pattern is not None:
                log.debug(
                    "resolved category=%s for column=%s value=%r (regex=%r)",
                    compiled.category,
                    column_name,
                    cell_value,
                    pattern.pattern,
                )
                return compiled.category
    return None


class CategoryMatcher:
    """
    Holds the precompiled rule index for one configuration.

    Construction compiles every pattern, so an invalid regex fails here
    before any row is looked at.
    """

    def __init__(self, rules: Iterable[CategoryRule]):
        self.rule_index: RuleIndex = build_rule_index(rules)

    def columns(self) -> List[str]:
        return list(self.rule_index.keys())

    def resolve_category(self, row: Row) -> Optional[str]:
        return resolve_category(row, self.rule_index)
