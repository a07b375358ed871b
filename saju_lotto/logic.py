from __future__ import annotations
import random
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from loguru import logger

from .pools import MIXED_BASE, MIXED_MID, NUM_RANGE, WEIGHTED, pool_for
from .profile import resolve
from .sampler import sample
from .schemas import Draw, Element, GenerateRequest, GeneratedResult, Strategy
from .weights import SIZE, frequency_weights, gap_weights

PICK = 6
WEIGHTED_POOL = 10     # 가중 전략 1회 추출 후보 수
FILL_OVERSAMPLE = 15   # 중복 대비 여유분
DILUTE_CAP = 3         # RANDOM 동반 선택 시 남길 후보 수

def weights_for(tag: Strategy, history: Sequence[Draw]) -> List[float]:
    if tag == Strategy.GAP:
        return gap_weights(history)
    if tag == Strategy.CDM:
        return frequency_weights(history)
    raise ValueError(f"{tag} is not a weighted strategy")

def _mixed_candidates(rng: random.Random) -> List[int]:
    fixed = MIXED_BASE + MIXED_MID
    rest = [n for n in NUM_RANGE if n not in fixed]
    return list(fixed) + [rng.choice(rest)]

def _candidates(tags: Iterable[Strategy], element: Element, history: Sequence[Draw],
                rng: random.Random, vectors: Dict[Strategy, List[float]]) -> List[int]:
    cands = set()
    for tag in tags:
        if tag in WEIGHTED:
            vectors[tag] = weights_for(tag, history)
            cands.update(sample(vectors[tag], WEIGHTED_POOL, rng))
        elif tag == Strategy.MIXED:
            cands.update(_mixed_candidates(rng))
        else:
            cands.update(pool_for(tag, element))
    return sorted(cands)

def _fill(picks: List[int], weights: Optional[List[float]], rng: random.Random) -> List[int]:
    need = PICK - len(picks)
    chosen = set(picks)
    out: List[int] = []
    if weights is not None:
        local_w = [0.0 if n in chosen else w for n, w in zip(NUM_RANGE, weights)]
        request = min(need + FILL_OVERSAMPLE, SIZE - len(chosen))
        out = [n for n in sample(local_w, request, rng) if n not in chosen][:need]
    if len(out) < need:
        taken = chosen.union(out)
        rest = [n for n in NUM_RANGE if n not in taken]
        rng.shuffle(rest)
        out += rest[:need - len(out)]
    return out

def generate(strategies: Iterable[Strategy], element: Element, history: Sequence[Draw],
             rng: Optional[random.Random] = None) -> List[int]:
    """Merge the selected strategies into six distinct, ascending numbers."""
    rng = rng or random.Random()
    tags = list(dict.fromkeys(strategies))
    has_random = Strategy.RANDOM in tags
    others = [t for t in tags if t != Strategy.RANDOM]

    vectors: Dict[Strategy, List[float]] = {}
    picks = _candidates(others, element, history, rng, vectors)
    rng.shuffle(picks)
    if has_random and others:
        picks = picks[:DILUTE_CAP]

    fill_w = None
    if not has_random:
        fill_w = next((vectors[t] for t in WEIGHTED if t in vectors), None)

    logger.debug("generate tags={} candidates={} fill={}", [t.value for t in tags], len(picks),
                 "weighted" if fill_w is not None else "uniform")
    if len(picks) < PICK:
        picks += _fill(picks, fill_w, rng)
    return sorted(picks[:PICK])

def generate_result(req: GenerateRequest, history: Sequence[Draw],
                    rng: Optional[random.Random] = None) -> GeneratedResult:
    profile = resolve(req.year)
    rng = rng or random.Random(req.seed)
    nums = generate(req.strategies, profile.element, history, rng)
    return GeneratedResult(numbers=nums, strategies=list(req.strategies),
                           element=profile.element, zodiac=profile.zodiac)

# 구간/색상
def range_buckets() -> List[Tuple[str, str, range]]:
    return [("1-10", "yellow", range(1, 11)), ("11-20", "blue", range(11, 21)),
            ("21-30", "red", range(21, 31)), ("31-40", "gray", range(31, 41)),
            ("41-45", "green", range(41, 46))]

def band_for(n: int) -> str:
    for label, color, bucket in range_buckets():
        if n in bucket:
            return color
    raise ValueError(f"{n} is outside 1..45")

def range_counts(nums: Iterable[int]) -> Dict[str, int]:
    out = {label: 0 for label, _, _ in range_buckets()}
    for n in nums:
        for label, _, bucket in range_buckets():
            if n in bucket:
                out[label] += 1
                break
    return out

def compute_range_freq(history: Sequence[Draw]) -> Dict[str, Dict[str, int]]:
    per = {label: {str(n): 0 for n in bucket} for label, _, bucket in range_buckets()}
    for d in history:
        for n in d.numbers:
            for label, _, bucket in range_buckets():
                if n in bucket:
                    per[label][str(n)] += 1
                    break
    return per
