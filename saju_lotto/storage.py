from __future__ import annotations
from pathlib import Path
import json
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic import TypeAdapter, ValidationError

from . import config
from .schemas import Draw
from .weights import sort_recent_first

# 내장 샘플 회차 (최근 회차 우선). HISTORY_PATH 로 교체 가능
DEFAULT_HISTORY: List[Dict[str, Any]] = [
    {"draw_no": 1060, "date": "2023.03.25", "numbers": [3, 10, 24, 33, 38, 45], "bonus": 12},
    {"draw_no": 1059, "date": "2023.03.18", "numbers": [7, 10, 22, 25, 34, 40], "bonus": 27},
    {"draw_no": 894,  "date": "2020.01.18", "numbers": [19, 32, 37, 40, 41, 45], "bonus": 2},
    {"draw_no": 893,  "date": "2020.01.11", "numbers": [1, 15, 17, 23, 25, 41], "bonus": 10},
    {"draw_no": 762,  "date": "2017.07.08", "numbers": [10, 12, 18, 31, 38, 41], "bonus": 42},
    {"draw_no": 630,  "date": "2014.12.27", "numbers": [3, 4, 15, 22, 28, 40], "bonus": 41},
    {"draw_no": 600,  "date": "2014.05.31", "numbers": [5, 11, 14, 27, 29, 36], "bonus": 44},
    {"draw_no": 599,  "date": "2014.05.24", "numbers": [8, 12, 17, 29, 30, 44], "bonus": 3},
]

_draws = TypeAdapter(List[Draw])

def _safe_read(path: Path) -> Optional[List[Draw]]:
    try:
        return _draws.validate_python(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("history file {} unusable, falling back to bundled draws: {}", path, e)
        return None

def read_history(path: str | Path | None = None) -> List[Draw]:
    """Historical draws, most recent first."""
    src = path if path is not None else config.HISTORY_PATH
    items = _safe_read(Path(src)) if src else None
    if items is None:
        items = _draws.validate_python(DEFAULT_HISTORY)
    return sort_recent_first(items)

def read_last_draw(path: str | Path | None = None) -> Optional[Draw]:
    items = read_history(path)
    return items[0] if items else None
