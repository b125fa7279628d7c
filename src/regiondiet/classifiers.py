from __future__ import annotations

import re
from typing import Iterable, List, Optional, Sequence

from .taxonomy import (
    ALL_INGREDIENT_MODIFIERS,
    CUISINE_REGION_RULES,
    DIET_RULES,
    INGREDIENT_SYNONYMS,
    SWEET_COURSE_KEYWORDS,
    SWEET_INGREDIENT_KEYWORDS,
    SWEET_NAME_KEYWORDS,
    SWEET_TOKEN_KEYWORDS,
    UNKNOWN_DIET,
    RegionRule,
)


_NON_LETTERS = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")
_PARENTHESIZED = re.compile(r"\([^)]*\)")
_LABEL_NOISE = re.compile(r"recipes?|cuisine")


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", _NON_LETTERS.sub(" ", text)).strip()


def classify_diet(raw_diet: Optional[str]) -> str:
    if not raw_diet:
        return UNKNOWN_DIET
    diet = str(raw_diet).lower()
    for needle, label in DIET_RULES:
        if needle in diet:
            return label
    return UNKNOWN_DIET


def normalize_region_text(label: str) -> str:
    return _collapse(_LABEL_NOISE.sub("", label.lower()))


def infer_region(
    raw_text: Optional[str], rules: Sequence[RegionRule] = CUISINE_REGION_RULES
) -> Optional[str]:
    """Guess a canonical state from a cuisine or dish label such as "Chettinad Recipes"."""
    if not raw_text or not isinstance(raw_text, str):
        return None
    normalized = normalize_region_text(raw_text)
    if not normalized:
        return None
    for rule in rules:
        if rule.matches(normalized):
            return rule.region
    return None


def is_sweet(
    name: str,
    course: Optional[str],
    tokens: Sequence[str],
    raw_ingredients: str,
) -> bool:
    course_lower = (course or "").lower()
    if any(kw in course_lower for kw in SWEET_COURSE_KEYWORDS):
        return True
    name_lower = (name or "").lower()
    if any(kw in name_lower for kw in SWEET_NAME_KEYWORDS):
        return True
    raw_lower = (raw_ingredients or "").lower()
    if any(kw in raw_lower for kw in SWEET_INGREDIENT_KEYWORDS):
        return True
    return any(kw in token for token in tokens for kw in SWEET_TOKEN_KEYWORDS)


def tokenize_ingredients(raw: Optional[str]) -> List[str]:
    if not raw:
        return []
    tokens: List[str] = []
    for part in str(raw).lower().split(","):
        part = _PARENTHESIZED.sub("", part).strip()
        part = _collapse(part)
        if part:
            tokens.append(part)
    return tokens


def normalize_ingredient(token: str) -> str:
    """Reduce an ingredient phrase to its core name ("finely chopped onions" -> "onion")."""
    words = []
    for word in token.split():
        word = INGREDIENT_SYNONYMS.get(word, word)
        if word in ALL_INGREDIENT_MODIFIERS:
            continue
        words.append(word)
    return " ".join(words)


def any_mention(tokens: Iterable[str], terms: Sequence[str]) -> bool:
    return any(term in token for token in tokens for term in terms)
