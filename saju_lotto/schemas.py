from __future__ import annotations
from datetime import date, datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing_extensions import Annotated

Ball = Annotated[int, Field(ge=1, le=45)]
SixNums = Annotated[List[Ball], Field(min_length=6, max_length=6)]

class Element(str, Enum):
    WOOD = "목(Wood)"
    FIRE = "화(Fire)"
    EARTH = "토(Earth)"
    METAL = "금(Metal)"
    WATER = "수(Water)"

class Strategy(str, Enum):
    SAJU = "SAJU"
    MIXED = "MIXED"
    PROBABILITY = "PROBABILITY"
    RANDOM = "RANDOM"
    CDM = "CDM"
    GAP = "GAP"

class Draw(BaseModel):
    model_config = ConfigDict(frozen=True)

    draw_no: int
    date: str
    numbers: SixNums
    bonus: Ball

    @field_validator("date")
    @classmethod
    def _check_date(cls, v: str) -> str:
        datetime.strptime(v, "%Y.%m.%d")
        return v

    @property
    def draw_date(self) -> date:
        return datetime.strptime(self.date, "%Y.%m.%d").date()

class Profile(BaseModel):
    model_config = ConfigDict(frozen=True)

    zodiac: str
    element: Element

class BirthProfile(Profile):
    year: int
    month: int = 1
    day: int = 1
    hour: int = 12
    lucky_numbers: List[int] = []

class GenerateRequest(BaseModel):
    """Immutable generation request: birth data plus 1–2 strategy tags."""
    model_config = ConfigDict(frozen=True)

    year: int = 1990
    month: int = Field(1, ge=1, le=12)
    day: int = Field(1, ge=1, le=31)
    hour: int = Field(12, ge=0, le=23)
    strategies: List[Strategy] = Field(default_factory=lambda: [Strategy.SAJU], min_length=1, max_length=2)
    seed: Optional[int] = None
    fortune: bool = False

    @field_validator("strategies")
    @classmethod
    def _distinct(cls, v: List[Strategy]) -> List[Strategy]:
        if len(set(v)) != len(v):
            raise ValueError("strategies must be distinct")
        return v

class GeneratedResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    numbers: SixNums
    strategies: List[Strategy]
    element: Element
    zodiac: str

class BallOut(BaseModel):
    number: Ball
    band: str

class GenerateResponse(BaseModel):
    numbers: SixNums
    balls: List[BallOut]
    strategies: List[Strategy]
    strategy_label: str
    element: Element
    zodiac: str
    ranges: dict[str, int]
    fortune: Optional[str] = None

class FortuneRequest(BaseModel):
    year: int
    numbers: List[Ball] = Field(min_length=1, max_length=6)
    strategies: List[Strategy] = Field(default_factory=lambda: [Strategy.SAJU], min_length=1)

class FortuneResponse(BaseModel):
    text: str
