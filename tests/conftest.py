import random
from datetime import date, timedelta

import pytest

from saju_lotto.schemas import Draw


class StillRandom(random.Random):
    """Random source that never shuffles and always lands on the first slot."""

    def random(self):
        return 0.0

    def shuffle(self, x):
        pass

    def choice(self, seq):
        return seq[0]


def make_draw(draw_no, when, numbers, bonus=45):
    if isinstance(when, date):
        when = when.strftime("%Y.%m.%d")
    return Draw(draw_no=draw_no, date=when, numbers=numbers, bonus=bonus)


@pytest.fixture
def still_rng():
    return StillRandom()


@pytest.fixture
def gap_history():
    latest = date(2024, 8, 1)
    return [
        make_draw(2, latest, [1, 2, 3, 4, 5, 6]),
        make_draw(1, latest - timedelta(days=200), [7, 8, 9, 10, 11, 12]),
    ]


@pytest.fixture
def history():
    from saju_lotto.storage import read_history
    return read_history("")
