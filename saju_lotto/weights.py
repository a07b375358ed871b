"""Per-number weight vectors over 1..45.

Index i of a vector holds the weight of number i+1. Both policies are
deterministic for a given history.
"""
from __future__ import annotations
from collections import Counter
from typing import List, Sequence, Tuple
from .schemas import Draw

SIZE = 45

# "CDM" 평활화 (이름만 변분 베이즈, 실제로는 반복 비례 보정)
CDM_PRIOR = 1.0
CDM_ITERATIONS = 30
CDM_STEP = 0.05
CDM_FLOOR = 0.01

# 3-Strategy 간격 단계: (최대 경과일, 배수)
GAP_BASE_WEIGHT = 10
GAP_NEVER_SEEN = 999
GAP_PHASES: Tuple[Tuple[int, int], ...] = ((60, 1), (120, 2), (180, 5))
GAP_OVERDUE_MULTIPLIER = 12

def observed_counts(history: Sequence[Draw]) -> List[int]:
    cnt = Counter()
    for d in history:
        cnt.update(d.numbers)
    return [cnt.get(n, 0) for n in range(1, SIZE + 1)]

def frequency_weights(history: Sequence[Draw]) -> List[float]:
    observed = observed_counts(history)
    total_observed = sum(observed)
    w = [CDM_PRIOR] * SIZE
    for _ in range(CDM_ITERATIONS):
        total = sum(w)
        shares = [x / total for x in w]
        w = [max(CDM_FLOOR, x + CDM_STEP * (obs - share * total_observed))
             for x, obs, share in zip(w, observed, shares)]
    return w

def sort_recent_first(history: Sequence[Draw]) -> List[Draw]:
    return sorted(history, key=lambda d: (d.draw_date, d.draw_no), reverse=True)

def gap_days(history: Sequence[Draw]) -> List[int]:
    draws = sort_recent_first(history)
    if not draws:
        return [GAP_NEVER_SEEN] * SIZE
    latest = draws[0].draw_date
    gaps = [GAP_NEVER_SEEN] * SIZE
    seen = set()
    for d in draws:
        for n in d.numbers:
            if n not in seen:
                seen.add(n)
                gaps[n - 1] = (latest - d.draw_date).days
    return gaps

def phase_multiplier(days: int) -> int:
    for limit, mult in GAP_PHASES:
        if days <= limit:
            return mult
    return GAP_OVERDUE_MULTIPLIER

def gap_weights(history: Sequence[Draw]) -> List[float]:
    return [float(GAP_BASE_WEIGHT * phase_multiplier(g)) for g in gap_days(history)]
