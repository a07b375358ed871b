# saju_lotto/main.py — 사주 로또 API
from __future__ import annotations
from typing import List

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from . import config
from .fortune import tell_fortune
from .logic import band_for, compute_range_freq, generate_result, range_counts
from .pools import element_stats, pool_for, strategy_label
from .profile import resolve
from .schemas import (BallOut, BirthProfile, Draw, FortuneRequest, FortuneResponse,
                      GenerateRequest, GenerateResponse, Strategy)
from .storage import read_history

config.configure_logging()

STATIC_DIR = config.BASE_DIR / "static"

app = FastAPI(title="Saju Lotto", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if STATIC_DIR.exists():
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

@app.get("/")
async def root():
    index = STATIC_DIR / "index.html"
    if index.exists():
        return FileResponse(index)
    return {"ok": True, "tip": "POST /api/generate"}

@app.get("/healthz")
async def healthz():
    return {"ok": True, "fortune_enabled": bool(config.GEMINI_API_KEY)}

@app.get("/api/profile", response_model=BirthProfile)
async def api_profile(year: int = Query(1990), month: int = Query(1, ge=1, le=12),
                      day: int = Query(1, ge=1, le=31), hour: int = Query(12, ge=0, le=23)):
    p = resolve(year)
    return BirthProfile(year=year, month=month, day=day, hour=hour, zodiac=p.zodiac,
                        element=p.element, lucky_numbers=sorted(pool_for(Strategy.SAJU, p.element)))

@app.get("/api/elements")
async def api_elements():
    return {"items": element_stats()}

@app.get("/api/history")
async def api_history():
    items: List[Draw] = read_history()
    return {"items": [d.model_dump() for d in items]}

@app.get("/api/history/ranges")
async def api_history_ranges():
    return JSONResponse({"per": compute_range_freq(read_history())})

@app.post("/api/generate", response_model=GenerateResponse)
async def api_generate(req: GenerateRequest):
    res = generate_result(req, read_history())
    logger.info("generated {} via {}", res.numbers, [s.value for s in res.strategies])
    fortune = None
    if req.fortune:
        fortune = await tell_fortune(req.year, res.numbers, res.strategies)
    return GenerateResponse(
        numbers=res.numbers,
        balls=[BallOut(number=n, band=band_for(n)) for n in res.numbers],
        strategies=res.strategies,
        strategy_label=strategy_label(res.strategies),
        element=res.element,
        zodiac=res.zodiac,
        ranges=range_counts(res.numbers),
        fortune=fortune,
    )

@app.post("/api/fortune", response_model=FortuneResponse)
async def api_fortune(req: FortuneRequest):
    return FortuneResponse(text=await tell_fortune(req.year, req.numbers, req.strategies))
