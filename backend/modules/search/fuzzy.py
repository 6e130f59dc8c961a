"""
Typo-tolerant search terms.

Expands a query into spelling variants (insertions, deletions, look-alike
substitutions, transpositions and a few hand-picked patterns such as
"wiskey" <-> "whiskey"). Every variant counts equally; there is no
distance metric or ranking, only substring matching.
"""

import re
from string import ascii_lowercase
from typing import Iterable

# Letters and digraphs that are commonly confused for one another
SIMILAR_LETTERS: dict[str, list[str]] = {
    "a": ["e", "o", "u"],
    "e": ["a", "i", "o"],
    "i": ["e", "y", "a"],
    "o": ["u", "a", "e"],
    "u": ["o", "i", "a"],
    "y": ["i", "e"],
    "c": ["k", "s"],
    "k": ["c", "q"],
    "s": ["z", "c"],
    "z": ["s"],
    "ph": ["f"],
    "f": ["ph"],
    "ck": ["k"],
    "qu": ["kw", "q"],
    "ei": ["ie"],
    "ie": ["ei"],
}


def _unique(items: Iterable[str]) -> list[str]:
    """De-duplicate, keeping first occurrences in order."""
    return list(dict.fromkeys(items))


def generate_typo_variations(word: str) -> list[str]:
    """
    Generate spelling variants of a single word.

    The original word is always first. Variants shorter than
    max(2, len(word) - 2) are dropped.

    Args:
        word: The word to expand

    Returns:
        De-duplicated list of variants
    """
    variations = [word]

    if len(word) < 2:
        return variations

    # Spacing: join split words, or split joined ones
    if re.search(r"\s", word):
        variations.append(re.sub(r"\s+", "", word))
    else:
        for i in range(1, len(word)):
            variations.append(word[:i] + " " + word[i:])

    # Missing letter anywhere ("wiskey" -> "whiskey")
    for i in range(len(word) + 1):
        for letter in ascii_lowercase:
            variations.append(word[:i] + letter + word[i:])

    # Extra letter
    if len(word) > 2:
        for i in range(len(word)):
            variations.append(word[:i] + word[i + 1:])

    # Look-alike letters and digraphs
    for i in range(len(word)):
        for replacement in SIMILAR_LETTERS.get(word[i].lower(), []):
            variations.append(word[:i] + replacement + word[i + 1:])

        if i < len(word) - 1:
            for replacement in SIMILAR_LETTERS.get(word[i:i + 2].lower(), []):
                variations.append(word[:i] + replacement + word[i + 2:])

    # Transposed neighbours
    for i in range(len(word) - 1):
        variations.append(word[:i] + word[i + 1] + word[i] + word[i + 2:])

    lowered = word.lower()
    if "wis" in lowered:
        variations.append(lowered.replace("wis", "whis", 1))
    if "whis" in lowered:
        variations.append(lowered.replace("whis", "wis", 1))

    if word.endswith("ey"):
        variations.append(word[:-2] + "y")
    if word.endswith("y") and len(word) > 3:
        variations.append(word[:-1] + "ey")

    if "ske" in word:
        variations.append(word.replace("ske", "sk"))
    if "sk" in word and "ske" not in word:
        variations.append(word.replace("sk", "ske"))

    min_length = max(2, len(word) - 2)
    return [v for v in _unique(variations) if len(v) >= min_length]


def create_fuzzy_search_terms(query: str) -> list[str]:
    """
    Expand a free-text query into search terms.

    Returns the normalised query, its space-free and space-collapsed forms,
    and the typo variations of every word longer than one character.
    """
    if not query or not query.strip():
        return []

    trimmed = query.strip().lower()
    terms = [
        trimmed,
        re.sub(r"\s+", "", trimmed),
        re.sub(r"\s+", " ", trimmed),
    ]

    for word in trimmed.split(" "):
        if len(word) > 1:
            terms.extend(generate_typo_variations(word))

    return _unique(terms)


def matches(text: str | None, terms: list[str]) -> bool:
    """True if any term occurs in text (case-insensitive)."""
    if not text or not terms:
        return False
    haystack = text.lower()
    return any(term in haystack for term in terms)
