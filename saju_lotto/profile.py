from __future__ import annotations
from typing import List
from .schemas import Element, Profile

ZODIACS: List[str] = [
    "원숭이(Monkey)", "닭(Rooster)", "개(Dog)", "돼지(Pig)",
    "쥐(Rat)", "소(Ox)", "호랑이(Tiger)", "토끼(Rabbit)",
    "용(Dragon)", "뱀(Snake)", "말(Horse)", "양(Sheep)",
]

# 천간 인덱스(year % 10) 순서: 갑을 병정 무기 경신 임계
STEMS: List[Element] = [
    Element.WOOD, Element.WOOD,
    Element.FIRE, Element.FIRE,
    Element.EARTH, Element.EARTH,
    Element.METAL, Element.METAL,
    Element.WATER, Element.WATER,
]

def zodiac_for(year: int) -> str:
    # 파이썬 % 는 음수 연도에도 0 이상을 돌려줌
    return ZODIACS[year % 12]

def element_for(year: int) -> Element:
    return STEMS[year % 10]

def resolve(year: int) -> Profile:
    return Profile(zodiac=zodiac_for(year), element=element_for(year))
