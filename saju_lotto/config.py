# saju_lotto/config.py — 환경변수 기반 설정
from __future__ import annotations
import os, sys
from pathlib import Path

from loguru import logger

BASE_DIR    = Path(__file__).resolve().parent.parent

GEMINI_API_KEY  = os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", "")
GEMINI_MODEL    = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
GEMINI_BASE     = os.getenv("GEMINI_BASE", "https://generativelanguage.googleapis.com/v1beta")
FORTUNE_TIMEOUT = float(os.getenv("FORTUNE_TIMEOUT", "8"))

# 비어 있으면 내장 샘플 회차 사용
HISTORY_PATH = os.getenv("HISTORY_PATH", "")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
PORT      = int(os.getenv("PORT", "8000"))

_configured = False

def configure_logging(level: str | None = None) -> None:
    global _configured
    if _configured:
        return
    logger.remove()
    logger.add(sys.stderr, level=(level or LOG_LEVEL).upper(),
               format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{line} - {message}")
    _configured = True
