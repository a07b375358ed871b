from __future__ import annotations
import random
from typing import List, Sequence
from .weights import SIZE

def sample(weights: Sequence[float], count: int, rng: random.Random) -> List[int]:
    """Roulette-wheel draw of `count` distinct numbers (1..45) without replacement.

    Once every positive weight is used up the rest is filled uniformly from
    the numbers not yet chosen.
    """
    if len(weights) != SIZE:
        raise ValueError(f"weight vector must have {SIZE} entries, got {len(weights)}")
    if not 0 <= count <= SIZE:
        raise ValueError(f"cannot draw {count} distinct numbers from 1..{SIZE}")

    local_w = [max(0.0, float(w)) for w in weights]
    picks: List[int] = []
    while len(picks) < count:
        tot = sum(local_w)
        if tot <= 0:
            rest = [n for n in range(1, SIZE + 1) if n not in picks]
            rng.shuffle(rest)
            picks.extend(rest[:count - len(picks)])
            break
        r = rng.random() * tot
        idx = -1
        for i, w in enumerate(local_w):
            if w <= 0:
                continue
            idx = i
            r -= w
            if r < 0:
                break
        picks.append(idx + 1)
        local_w[idx] = 0.0
    return picks
