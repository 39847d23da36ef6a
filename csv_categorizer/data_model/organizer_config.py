# csv_categorizer/data_model/organizer_config.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from typing_extensions import TypeAlias

from ..exceptions import ConfigurationError
from .interfaces import SortType

# canonical column name -> accepted aliases (matched case-insensitively)
ColumnAliasTable: TypeAlias = Dict[str, Tuple[str, ...]]

DEFAULT_CATEGORY_NAME = "Other"


@dataclass(frozen=True)
class CategoryRule:
    """
    A row whose ``column_name`` cell fully matches any of ``regexes``
    (case-insensitive) belongs to ``category``.
    """

    category: str
    column_name: str
    regexes: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DateTransformerConfig:
    """Rewrites a date cell from the first matching input format to ``output_format``."""

    input_formats: Tuple[str, ...]
    output_format: str


@dataclass(frozen=True)
class OrganizerConfig:
    """
    Immutable settings for one organize run.

    ``column_name_to_aliases`` and ``category_rules`` keep their declaration
    order; both orders are significant (alias resolution and rule precedence).
    """

    column_name_to_aliases: Mapping[str, Iterable[str]] = field(default_factory=dict)
    category_rules: Tuple[CategoryRule, ...] = ()
    default_category_name: str = DEFAULT_CATEGORY_NAME
    sort_column_name: Optional[str] = None
    sort_type: SortType = SortType.ASC
    column_name_to_date_transformer: Mapping[str, DateTransformerConfig] = field(
        default_factory=dict
    )

    def __post_init__(self) -> None:
        if self.default_category_name is None or not str(self.default_category_name).strip():
            raise ConfigurationError(
                "defaultCategoryName must be a non-empty string",
                {"field": "defaultCategoryName"},
            )
        if not isinstance(self.sort_type, SortType):
            raise ConfigurationError(
                f"sort_type must be a SortType, got {self.sort_type!r}",
                {"field": "sortType"},
            )
        aliases: ColumnAliasTable = {
            name: tuple(values or ()) for name, values in self.column_name_to_aliases.items()
        }
        object.__setattr__(self, "column_name_to_aliases", aliases)
        object.__setattr__(self, "category_rules", tuple(self.category_rules))
        object.__setattr__(
            self,
            "column_name_to_date_transformer",
            dict(self.column_name_to_date_transformer),
        )

    def column_names(self) -> List[str]:
        """Canonical column names in declaration order."""
        return list(self.column_name_to_aliases.keys())

    def category_names(self) -> List[str]:
        """Default category first, then rule categories by first declaration."""
        names: List[str] = [self.default_category_name]
        for rule in self.category_rules:
            if rule.category not in names:
                names.append(rule.category)
        return names
