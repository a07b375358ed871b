from __future__ import annotations
from typing import Dict, FrozenSet, List, Tuple
from .schemas import Element, Strategy

NUM_RANGE = range(1, 46)

OHENG_NUMBERS: Dict[Element, Tuple[int, ...]] = {
    Element.WOOD:  (3, 13, 23, 33, 43),
    Element.FIRE:  (2, 12, 22, 32, 42),
    Element.EARTH: (5, 15, 25, 35, 45),
    Element.METAL: (6, 16, 26, 36, 46),
    Element.WATER: (1, 11, 21, 31, 41),
}

PROBABILITY_NUMBERS: Tuple[int, ...] = (3, 16, 23, 33, 36, 43)

MIXED_BASE: Tuple[int, ...] = (6, 13, 21, 26)
MIXED_MID: Tuple[int, ...] = (34,)

WEIGHTED = (Strategy.GAP, Strategy.CDM)

LABELS_KO: Dict[Strategy, str] = {
    Strategy.SAJU: "사주 오행",
    Strategy.CDM: "CDM 과학적 분석",
    Strategy.GAP: "3-Strategy 간격 분석",
}

def pool_for(tag: Strategy, element: Element) -> FrozenSet[int]:
    """Static candidates for a pool-backed tag; empty for weighted/random tags.

    Members outside 1-45 (Metal's 46) are dropped.
    """
    if tag == Strategy.SAJU:
        nums = OHENG_NUMBERS[element]
    elif tag == Strategy.MIXED:
        nums = MIXED_BASE + MIXED_MID
    elif tag == Strategy.PROBABILITY:
        nums = PROBABILITY_NUMBERS
    else:
        nums = ()
    return frozenset(n for n in nums if n in NUM_RANGE)

def strategy_label(strategies: List[Strategy]) -> str:
    return " + ".join(LABELS_KO.get(s, s.value) for s in strategies)

def element_stats() -> List[Dict[str, object]]:
    # 차트는 오행표 전체 기준 (금의 46 포함)
    return [{"element": e.value, "count": len(OHENG_NUMBERS[e])} for e in Element]
