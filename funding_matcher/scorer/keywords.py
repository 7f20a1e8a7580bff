"""Keyword tables mapping profile vocabulary to trigger substrings.

Matching is plain case-insensitive substring containment, so short
keywords can fire inside unrelated words ("cc" inside "access", "share"
inside "shareholders"). That looseness is a known limitation of the
heuristic and is kept as is.
"""

from typing import Dict, Iterable, List, Tuple

FUNDING_TYPE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Grants": ("grant", "funding", "support", "assistance"),
    "Loans": ("loan", "financing", "credit", "borrow"),
    "Equity Investment": ("equity", "investment", "share", "stake"),
    "Vouchers": ("voucher", "voucher scheme", "voucher program"),
    "Subsidies": ("subsidy", "subsidized", "subsidies"),
    "Mentorship Programs": ("mentorship", "mentor", "mentoring", "guidance"),
}

BUSINESS_TYPE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "sole-proprietor": ("sole proprietor", "sole trader", "individual", "personal"),
    "partnership": ("partnership", "partners"),
    "pty-ltd": ("pty", "ltd", "limited", "company", "corporation"),
    "cc": ("close corporation", "cc"),
    "npc": ("non-profit", "npc", "nonprofit", "ngo"),
    "cooperative": ("cooperative", "co-op", "cooperative society"),
}

FUNDING_AMOUNT_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "under-100k": ("under", "up to", "less than", "100,000", "100k"),
    "100k-500k": ("100", "500", "100k", "500k"),
    "500k-1m": ("500", "1 million", "500k", "1m"),
    "1m-5m": ("1 million", "5 million", "1m", "5m"),
    "5m-10m": ("5 million", "10 million", "5m", "10m"),
    "10m-50m": ("10 million", "50 million", "10m", "50m"),
    "over-50m": ("over", "more than", "50 million", "50m"),
}

# Eligibility wording that signals no business-type restriction
OPEN_ELIGIBILITY_MARKERS: Tuple[str, ...] = ("all", "any", "eligible")

BEE_MARKERS: Tuple[str, ...] = ("bee", "black economic empowerment")


def keywords_for(table: Dict[str, Tuple[str, ...]], key: str) -> Tuple[str, ...]:
    """Return the trigger substrings for key, or () when key is unknown."""
    return table.get(key, ())


def find_keyword(text: str, keywords: Iterable[str]) -> str:
    """Return the first keyword contained in text, or "" if none is."""
    for keyword in keywords:
        if keyword in text:
            return keyword
    return ""


def split_sectors(sectors: str) -> List[str]:
    """Split a comma-separated sector list into lower-cased, trimmed tokens.

    Empty tokens are dropped; anything that is not a string yields [].
    """
    if not isinstance(sectors, str):
        return []
    return [token.strip() for token in sectors.lower().split(",") if token.strip()]


def first_token(text: str) -> str:
    """First space-delimited token of text (may be "")."""
    return text.split(" ")[0]
