from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, List, Pattern, Sequence, Tuple


VEGETARIAN = "vegetarian"
NON_VEGETARIAN = "non-vegetarian"
UNKNOWN_DIET = "unknown"

# First match wins: "non-vegetarian" contains "veg".
DIET_RULES: Sequence[Tuple[str, str]] = (
    ("non", NON_VEGETARIAN),
    ("egg", NON_VEGETARIAN),
    ("veg", VEGETARIAN),
)


@dataclass(frozen=True)
class RegionRule:
    pattern: Pattern[str]
    region: str

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None


def _make_rule(pattern: str, region: str) -> RegionRule:
    return RegionRule(pattern=re.compile(pattern), region=region)


_CUISINE_REGION_PATTERNS: Sequence[Tuple[str, str]] = (
    (r"\bandhra\b|rayalaseema|nellore|guntur", "Andhra Pradesh"),
    (r"\btelangana\b|hyderabadi|nizam", "Telangana"),
    (r"\bbengal\b|\bbengali\b|kolkata|calcutta", "West Bengal"),
    (r"\bodia\b|\boriya\b|\bodisha\b|cuttack|bhubaneswar", "Odisha"),
    (r"\bassam\b|\bassamese\b|ahom|bihu", "Assam"),
    (r"\bbihar\b|\bbihari\b|magahi", "Bihar"),
    (r"\barunachal\b|monpa|adi|nyishi", "Arunachal Pradesh"),
    (r"\bchh?attisgarh\b|bastar", "Chhattisgarh"),
    (r"\bgoa\b|\bgoan\b", "Goa"),
    (r"\bgujarat\b|\bgujarati\b|kathiyawadi|kathiawadi|surti", "Gujarat"),
    (r"\bharyana\b|haryanvi", "Haryana"),
    (r"\bhimachal\b|pahari|kangra", "Himachal Pradesh"),
    (r"\bjharkhand\b|chota nagpur", "Jharkhand"),
    (
        r"\bkarnataka\b|mangalorean|udupi|coorg|kodava|malnad|coastal karnataka"
        r"|north karnataka|south karnataka|mysore",
        "Karnataka",
    ),
    (r"\bkerala\b|malabar|onam|nadan", "Kerala"),
    (r"\bmadhya pradesh\b|malwa|bagheli|baghelkhand|mahakoshal|bhopal|indore", "Madhya Pradesh"),
    (r"\bmaharashtra\b|maharashtrian|konkan|malvani|vidarbha|kolhapuri|parsi", "Maharashtra"),
    (r"\bmanipur\b|manipuri|meitei", "Manipur"),
    (r"\bmeghalaya\b|khasi|jaintia|garo", "Meghalaya"),
    (r"\bmizoram\b|mizo", "Mizoram"),
    (r"\bnagaland\b|\bnaga\b", "Nagaland"),
    (r"\bsikkim\b|lepcha|bhutia", "Sikkim"),
    (r"\btamil\b|chettinad|kongunadu|madurai|tirunelveli", "Tamil Nadu"),
    (r"\buttar pradesh\b|awadhi|lucknowi|banarasi|kashi", "Uttar Pradesh"),
    (r"\buttarakhand\b|kumaon|garhwal|garhwali", "Uttarakhand"),
    (r"\bpunjab\b|punjabi|amritsar", "Punjab"),
    (r"\brajasthan\b|rajasthani|marwari|jaipuri|jodhpuri", "Rajasthan"),
    (r"\bdelhi\b|dilli", "Delhi"),
    (r"\bchandigarh\b", "Chandigarh"),
    (r"\bpuducherry\b|pondicherry", "Puducherry"),
    (r"\bandaman\b|nicobar|car nicobar", "Andaman and Nicobar Islands"),
    (r"\blakshadweep\b|laccadive|minicoy", "Lakshadweep"),
    (r"\bdadra\b|nagar haveli|daman|\bdiu\b", "Dadra and Nagar Haveli and Daman and Diu"),
    (r"\bladakh\b|ladakhi", "Ladakh"),
    (r"\bkashmir\b|kashmiri|kashmiri pandit", "Jammu and Kashmir"),
    (r"\btripura\b|tripuri|kokborok", "Tripura"),
    (r"\bgoan\b", "Goa"),
    (r"\bkonkani\b", "Goa"),
    (r"\bharyana\b", "Haryana"),
    (r"\bbastar\b", "Chhattisgarh"),
    (r"\bhimachali\b", "Himachal Pradesh"),
)

# Order encodes precedence between overlapping patterns.
CUISINE_REGION_RULES: List[RegionRule] = [
    _make_rule(pattern, region) for pattern, region in _CUISINE_REGION_PATTERNS
]

SWEET_COURSE_KEYWORDS: Sequence[str] = ("dessert", "sweet")

SWEET_NAME_KEYWORDS: Sequence[str] = (
    "sweet",
    "halwa",
    "laddu",
    "ladoo",
    "barfi",
    "burfi",
    "kheer",
    "payasam",
    "peda",
    "rasgulla",
    "rasmalai",
    "kesari",
    "jalebi",
    "sheera",
    "poli",
    "mithai",
    "malpua",
    "gulab jamun",
    "sandesh",
    "shrikhand",
    "ghewar",
    "modak",
    "kulfi",
    "puran poli",
)

SWEET_INGREDIENT_KEYWORDS: Sequence[str] = (
    "sugar",
    "jaggery",
    "honey",
    "condensed milk",
    "khoya",
    "mawa",
    "rabdi",
    "gud",
    "treacle",
    "molasses",
    "palm jaggery",
    "dates",
    "khoa",
)

# Multi-word keywords only ever match the raw ingredient text, never a token.
SWEET_TOKEN_KEYWORDS: Sequence[str] = tuple(kw for kw in SWEET_INGREDIENT_KEYWORDS if " " not in kw)

LENTIL_TERMS: Sequence[str] = ("lentil", "dal", "toor", "masoor", "moong", "chana", "chickpea", "arhar", "urad")
RED_MEAT_TERMS: Sequence[str] = ("mutton", "lamb", "pork", "beef", "yak")
POULTRY_TERMS: Sequence[str] = ("chicken", "duck")
FISH_TERMS: Sequence[str] = ("fish", "prawn", "prawns", "shrimp", "tuna", "pomfret", "crab", "seafood")
TURMERIC_TERMS: Sequence[str] = ("turmeric", "haldi")
NON_VEG_TERMS: Sequence[str] = (
    "chicken",
    "mutton",
    "lamb",
    "pork",
    "beef",
    "fish",
    "prawn",
    "prawns",
    "shrimp",
    "egg",
    "eggs",
    "crab",
    "tuna",
    "clam",
)


@dataclass(frozen=True)
class MentionCategory:
    """A per-dish ingredient flag counted into one accumulator field."""

    name: str
    terms: Sequence[str]
    label: str


def mention_categories() -> List[MentionCategory]:
    return [
        MentionCategory("lentil_like", LENTIL_TERMS, "Lentil mention share"),
        MentionCategory("red_meat_like", RED_MEAT_TERMS, "Red meat mention share"),
        MentionCategory("poultry", POULTRY_TERMS, "Poultry mention share"),
        MentionCategory("fish", FISH_TERMS, "Fish mention share"),
        MentionCategory("turmeric", TURMERIC_TERMS, "Turmeric mention share"),
    ]


INGREDIENT_MODIFIERS: Dict[str, Sequence[str]] = {
    "preparation": (
        "fresh", "frozen", "dried", "dry", "roasted", "fried", "boiled", "soaked",
        "cooked", "raw", "steamed", "toasted", "melted", "warm",
    ),
    "texture": (
        "chopped", "finely", "roughly", "diced", "minced", "sliced", "thinly", "grated",
        "crushed", "ground", "mashed", "pureed", "peeled", "whole", "split", "powder",
        "powdered", "paste", "leaves", "seeds", "pods", "cubes",
    ),
    "size": ("large", "medium", "small", "big"),
    "filler": ("to", "taste", "as", "required", "needed", "for", "garnish", "of", "a", "few", "pinch", "little"),
}

ALL_INGREDIENT_MODIFIERS = frozenset(word for words in INGREDIENT_MODIFIERS.values() for word in words)

# Regional names folded onto one English ingredient name.
INGREDIENT_SYNONYMS: Dict[str, str] = {
    "haldi": "turmeric",
    "jeera": "cumin",
    "dhania": "coriander",
    "methi": "fenugreek",
    "rai": "mustard",
    "sarson": "mustard",
    "adrak": "ginger",
    "lahsun": "garlic",
    "pyaz": "onion",
    "onions": "onion",
    "tamatar": "tomato",
    "tomatoes": "tomato",
    "potatoes": "potato",
    "aloo": "potato",
    "chillies": "chilli",
    "chilies": "chilli",
    "chili": "chilli",
    "mirch": "chilli",
    "hing": "asafoetida",
    "gud": "jaggery",
    "dahi": "curd",
    "yogurt": "curd",
    "elaichi": "cardamom",
    "imli": "tamarind",
    "nariyal": "coconut",
}

