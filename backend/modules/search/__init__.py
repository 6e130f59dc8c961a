"""
Search module.

Public API:
- create_fuzzy_search_terms: Expand a query into typo variants
- generate_typo_variations: Variants of a single word
- matches: Substring match against a term list
"""

from .fuzzy import (
    SIMILAR_LETTERS,
    create_fuzzy_search_terms,
    generate_typo_variations,
    matches,
)

__all__ = [
    "SIMILAR_LETTERS",
    "create_fuzzy_search_terms",
    "generate_typo_variations",
    "matches",
]
