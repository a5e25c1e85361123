"""Loading of the keyword rules used to categorize expense descriptions."""

import yaml
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple
from models.expense import ExpenseCategory
from logger import get_logger

logger = get_logger()

DEFAULT_RULES_FILE = Path(__file__).parent / "keywords.yaml"


@dataclass(frozen=True)
class KeywordRule:
    """Keywords that map a description to one category."""

    category: ExpenseCategory
    keywords: Tuple[str, ...]

    def matches(self, text: str) -> bool:
        """True when any keyword occurs in ``text`` (already lowercased)."""
        return any(keyword in text for keyword in self.keywords)


class KeywordRules:
    """Ordered keyword rules read from a YAML file.

    The file is parsed on first use and cached for the lifetime of the
    instance.
    """

    def __init__(self, rules_file: Optional[Path] = None):
        """Initialize the rule set.

        Args:
            rules_file: YAML file with a top-level ``rules`` list.
                        Defaults to categorization/keywords.yaml.
        """
        self.rules_file = rules_file or DEFAULT_RULES_FILE
        self._rules: Optional[List[KeywordRule]] = None

    @property
    def rules(self) -> List[KeywordRule]:
        """Rules in priority order.

        Raises:
            FileNotFoundError: If the rules file doesn't exist.
            ValueError: If the file is malformed or names an unknown category.
        """
        if self._rules is None:
            self._rules = self._load()
        return self._rules

    def _load(self) -> List[KeywordRule]:
        logger.debug(f"Loading keyword rules from {self.rules_file}")

        with open(self.rules_file, "r") as f:
            data = yaml.safe_load(f) or {}

        entries = data.get("rules")
        if not isinstance(entries, list):
            raise ValueError(f"{self.rules_file}: 'rules' must be a list")

        rules = []
        for entry in entries:
            if not isinstance(entry, dict) or "category" not in entry:
                raise ValueError(f"{self.rules_file}: rule without a category: {entry!r}")
            category = ExpenseCategory(entry["category"])
            keywords = tuple(str(k).lower() for k in entry.get("keywords", []))
            rules.append(KeywordRule(category=category, keywords=keywords))

        return rules
