# saju_lotto/fortune.py — AI 운세 해석 (실패해도 번호 생성에는 영향 없음)
from __future__ import annotations
from typing import Any, Dict, List, Optional

import httpx
from loguru import logger

from . import config
from .pools import strategy_label
from .profile import resolve
from .schemas import Strategy

PROMPT_TEMPLATE = """
You are a mystical Korean fortune teller specialized in Saju (Four Pillars of Destiny) and Numerology.
The user was born in {year} ({zodiac}, {element} element).
We have generated the following Lucky Lotto Numbers for them: {numbers}.
The strategy used was: {strategy}.

Please provide a short, mystical, and encouraging reading (max 3 sentences).
Explain why these numbers might be lucky for their element ({element}).
If the strategy is "SAJU", emphasize the elemental harmony.
If "RANDOM" or "MIXED", emphasize luck and chance.
Keep the tone wise, traditional yet modern.
Output in Korean.
"""

NO_KEY_TEXT   = "AI API Key가 설정되지 않아 운세 해석을 건너뜁니다."
EMPTY_TEXT    = "운세 정보를 가져올 수 없습니다."
FALLBACK_TEXT = "오늘의 운세 연결이 원활하지 않습니다. 하지만 행운은 당신 곁에 있습니다!"

HEADERS = {"User-Agent": "saju-lotto/1.0", "Content-Type": "application/json"}

def build_prompt(year: int, numbers: List[int], strategies: List[Strategy]) -> str:
    profile = resolve(year)
    return PROMPT_TEMPLATE.format(
        year=year,
        zodiac=profile.zodiac,
        element=profile.element.value,
        numbers=", ".join(str(n) for n in numbers),
        strategy=strategy_label(strategies),
    )

def _extract_text(data: Dict[str, Any]) -> Optional[str]:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return None
    if not isinstance(parts, list):
        return None
    texts = [p.get("text") for p in parts if isinstance(p, dict)]
    text = "".join(t for t in texts if isinstance(t, str)).strip()
    return text or None

async def _post(client: httpx.AsyncClient, prompt: str, api_key: str) -> Dict[str, Any]:
    url = f"{config.GEMINI_BASE}/models/{config.GEMINI_MODEL}:generateContent"
    r = await client.post(url, params={"key": api_key}, headers=HEADERS,
                          json={"contents": [{"parts": [{"text": prompt}]}]})
    r.raise_for_status()
    return r.json()

async def tell_fortune(year: int, numbers: List[int], strategies: List[Strategy],
                       api_key: Optional[str] = None,
                       client: Optional[httpx.AsyncClient] = None) -> str:
    """Best-effort narrative; every failure maps to a fixed message."""
    key = config.GEMINI_API_KEY if api_key is None else api_key
    if not key:
        return NO_KEY_TEXT
    prompt = build_prompt(year, numbers, strategies)
    try:
        if client is not None:
            data = await _post(client, prompt, key)
        else:
            async with httpx.AsyncClient(timeout=config.FORTUNE_TIMEOUT) as c:
                data = await _post(c, prompt, key)
    except (httpx.HTTPError, ValueError) as e:
        logger.warning("fortune request failed: {}", e)
        return FALLBACK_TEXT
    text = _extract_text(data) if isinstance(data, dict) else None
    if text is None:
        logger.warning("fortune response had no text")
        return EMPTY_TEXT
    return text
