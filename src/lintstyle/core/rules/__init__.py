from lintstyle.core.rules.base import Rule
from lintstyle.core.rules.braces import BracePlacementRule
from lintstyle.core.rules.declarations import OneDeclarationPerStatementRule, SemicolonRule
from lintstyle.core.rules.naming import NamingCaseRule
from lintstyle.core.rules.quotes import QuoteConsistencyRule
from lintstyle.core.rules.whitespace import (
    FinalNewlineRule,
    IndentWidthRule,
    LineLengthRule,
    NoCrlfRule,
    NoTrailingWhitespaceRule,
)

# Registry order is the order rules run in.
RULE_TYPES: dict[str, type[Rule]] = {
    rule_type.id: rule_type
    for rule_type in (
        IndentWidthRule,
        LineLengthRule,
        FinalNewlineRule,
        NoTrailingWhitespaceRule,
        NoCrlfRule,
        BracePlacementRule,
        QuoteConsistencyRule,
        NamingCaseRule,
        OneDeclarationPerStatementRule,
        SemicolonRule,
    )
}


def default_rules() -> list[Rule]:
    return [rule_type() for rule_type in RULE_TYPES.values() if rule_type.default_enabled]


__all__ = [
    "RULE_TYPES",
    "BracePlacementRule",
    "FinalNewlineRule",
    "IndentWidthRule",
    "LineLengthRule",
    "NamingCaseRule",
    "NoCrlfRule",
    "NoTrailingWhitespaceRule",
    "OneDeclarationPerStatementRule",
    "QuoteConsistencyRule",
    "Rule",
    "SemicolonRule",
    "default_rules",
]
