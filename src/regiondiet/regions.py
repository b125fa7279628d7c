"""Canonical state/UT vocabulary, spelling aliases and 2021 population figures."""

from __future__ import annotations

from typing import Dict, Optional


SENTINEL_REGIONS = frozenset({"", "-1"})

REGION_POPULATION_2021: Dict[str, int] = {
    "Andaman and Nicobar Islands": 419_978,
    "Andhra Pradesh": 53_903_393,
    "Arunachal Pradesh": 1_570_458,
    "Assam": 35_607_039,
    "Bihar": 127_403_751,
    "Chandigarh": 1_184_743,
    "Chhattisgarh": 29_436_231,
    "Dadra and Nagar Haveli and Daman and Diu": 867_846,
    "Delhi": 19_814_000,
    "Goa": 1_586_250,
    "Gujarat": 63_872_399,
    "Haryana": 28_902_198,
    "Himachal Pradesh": 7_304_787,
    "Jharkhand": 38_471_306,
    "Karnataka": 67_562_686,
    "Kerala": 35_699_443,
    "Madhya Pradesh": 85_358_965,
    "Maharashtra": 124_904_071,
    "Manipur": 3_117_011,
    "Meghalaya": 3_366_710,
    "Mizoram": 1_261_231,
    "Nagaland": 2_249_695,
    "Odisha": 46_356_334,
    "Puducherry": 1_504_000,
    "Punjab": 30_141_373,
    "Rajasthan": 81_032_689,
    "Sikkim": 690_251,
    "Tamil Nadu": 77_841_267,
    "Telangana": 37_173_107,
    "Tripura": 4_169_794,
    "Uttar Pradesh": 237_882_725,
    "Uttarakhand": 11_250_858,
    "West Bengal": 100_043_676,
    "Jammu and Kashmir": 13_635_010,
    "Ladakh": 297_419,
    "Lakshadweep": 73_199,
}

CANONICAL_REGIONS = frozenset(REGION_POPULATION_2021)

# Exact-match only. Identity entries are harmless and document spellings seen in the sources.
REGION_ALIASES: Dict[str, str] = {
    "NCT of Delhi": "Delhi",
    "National Capital Territory of Delhi": "Delhi",
    "Delhi (NCT)": "Delhi",
    "Uttaranchal": "Uttarakhand",
    "Jammu & Kashmir": "Jammu and Kashmir",
    "Dadra and Nagar Haveli": "Dadra and Nagar Haveli and Daman and Diu",
    "Daman": "Dadra and Nagar Haveli and Daman and Diu",
    "Daman and Diu": "Dadra and Nagar Haveli and Daman and Diu",
    "Andaman & Nicobar Islands": "Andaman and Nicobar Islands",
    "Pondicherry": "Puducherry",
    "Orissa": "Odisha",
    "Tamilnadu": "Tamil Nadu",
    "Chattisgarh": "Chhattisgarh",
    "Chhatisgarh": "Chhattisgarh",
    "Lakshadweep Islands": "Lakshadweep",
    "Arunachal": "Arunachal Pradesh",
    "Maharastra": "Maharashtra",
}


def normalize_region(raw: Optional[str]) -> str:
    """Map a raw state spelling onto its canonical key.

    Unknown spellings pass through trimmed, so an incomplete alias table shows
    up as an extra output row rather than as an error.
    """
    if raw is None:
        return ""
    trimmed = str(raw).strip()
    return REGION_ALIASES.get(trimmed, trimmed)


def is_sentinel(region: str) -> bool:
    return region in SENTINEL_REGIONS


def lookup_population(region: str, raw: Optional[str] = None) -> Optional[int]:
    population = REGION_POPULATION_2021.get(region)
    if population is None and raw is not None:
        population = REGION_POPULATION_2021.get(raw.strip())
    return population
