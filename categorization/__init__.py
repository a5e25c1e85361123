"""Keyword-based categorization of expense descriptions.

A description is lowercased and checked against an ordered list of keyword
rules (see keywords.yaml). The first rule with a matching keyword wins, so
"gas station food" is Food, not Transport. Descriptions matching no rule
are categorized as Other.
"""

from decimal import Decimal
from typing import Optional
from categorization.rules import KeywordRule, KeywordRules
from models.expense import ExpenseCategory

_default_rules = KeywordRules()


def categorize(
    description: str,
    amount: Optional[Decimal] = None,
    rules: Optional[KeywordRules] = None,
) -> ExpenseCategory:
    """Suggest a category for an expense description.

    Args:
        description: Free-text description entered by the user.
        amount: Expense amount. Currently not used by the rules.
        rules: Rule set to apply. Defaults to the bundled keyword rules.

    Returns:
        The category of the first matching rule, or ExpenseCategory.OTHER.
    """
    text = description.lower()
    for rule in (rules or _default_rules).rules:
        if rule.matches(text):
            return rule.category
    return ExpenseCategory.OTHER


__all__ = ["KeywordRule", "KeywordRules", "categorize"]
