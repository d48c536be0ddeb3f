# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Trade classification of free-text post strings.

Precedence is order-sensitive and checked top to bottom:
    1. OFFSHORE  (strict: "OFFSHORE MEDIC") -> OFFSHORE_MEDIC
    2. ESCORT    (strict: "ESCORT MEDIC")   -> ESCORT_MEDIC
    3. "IM" or "OHN"                        -> IMP_OHN (office-based)
    4. anything else                        -> UNCLASSIFIED
A post containing both "OFFSHORE" and "IM" is therefore an offshore medic.
"""

from typing import Optional

from app.models.domain import Trade

_RANKS: dict[Trade, int] = {
    Trade.OFFSHORE_MEDIC: 1,
    Trade.ESCORT_MEDIC: 2,
    Trade.IMP_OHN: 3,
    Trade.UNCLASSIFIED: 4,
}

_SHORT_CODES: dict[Trade, str] = {
    Trade.OFFSHORE_MEDIC: "OM",
    Trade.ESCORT_MEDIC: "EM",
    Trade.IMP_OHN: "OHN",
}


def classify_post(post: Optional[str], strict: bool = True) -> Trade:
    """Classify a post string into a Trade (case-insensitive)."""
    up = (post or "").upper()
    if ("OFFSHORE MEDIC" if strict else "OFFSHORE") in up:
        return Trade.OFFSHORE_MEDIC
    if ("ESCORT MEDIC" if strict else "ESCORT") in up:
        return Trade.ESCORT_MEDIC
    if "IM" in up or "OHN" in up:
        return Trade.IMP_OHN
    return Trade.UNCLASSIFIED


def trade_rank(trade: Trade) -> int:
    return _RANKS[trade]


def short_post(post: Optional[str]) -> str:
    """Short label (OM / EM / OHN), falling back to the raw post text."""
    return _SHORT_CODES.get(classify_post(post), post or "")


def full_trade_name(post: Optional[str]) -> str:
    """Group label for a post, falling back to the raw post text."""
    trade = classify_post(post)
    if trade is Trade.UNCLASSIFIED:
        return post or ""
    return trade.value


def matches_trade_filter(trade: Trade, trade_filter: str) -> bool:
    """Match against the short filter codes used by roster views (ALL/OM/EM/IMP/OHN)."""
    code = (trade_filter or "ALL").upper()
    if code == "ALL":
        return True
    if code == "OM":
        return trade is Trade.OFFSHORE_MEDIC
    if code == "EM":
        return trade is Trade.ESCORT_MEDIC
    if code in ("IMP/OHN", "OHN", "IMP"):
        return trade is Trade.IMP_OHN
    return False
