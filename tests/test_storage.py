"""Historical draw dataset loading."""

import json

from saju_lotto.storage import DEFAULT_HISTORY, read_history, read_last_draw
from saju_lotto.weights import sort_recent_first


class TestStorage:

    def test_bundled_history_is_recent_first(self):
        items = read_history("")
        assert len(items) == len(DEFAULT_HISTORY)
        dates = [d.draw_date for d in items]
        assert dates == sorted(dates, reverse=True)
        assert items[0].draw_no == 1060

    def test_override_file_is_sorted(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(json.dumps([
            {"draw_no": 1, "date": "2020.01.04", "numbers": [1, 2, 3, 4, 5, 6], "bonus": 7},
            {"draw_no": 2, "date": "2020.01.11", "numbers": [7, 8, 9, 10, 11, 12], "bonus": 13},
        ]), encoding="utf-8")
        items = read_history(path)
        assert [d.draw_no for d in items] == [2, 1]
        assert read_last_draw(path).draw_no == 2

    def test_invalid_file_falls_back(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(json.dumps([{"draw_no": 1, "date": "2020.01.04", "numbers": [0, 75], "bonus": 0}]),
                        encoding="utf-8")
        assert len(read_history(path)) == len(DEFAULT_HISTORY)

    def test_missing_file_falls_back(self, tmp_path):
        assert read_history(tmp_path / "nope.json")[0].draw_no == 1060

    def test_same_day_draws_order_by_draw_no(self, tmp_path):
        path = tmp_path / "history.json"
        path.write_text(json.dumps([
            {"draw_no": 5, "date": "2021.03.06", "numbers": [1, 2, 3, 4, 5, 6], "bonus": 7},
            {"draw_no": 9, "date": "2021.03.06", "numbers": [7, 8, 9, 10, 11, 12], "bonus": 13},
            {"draw_no": 3, "date": "2021.02.27", "numbers": [13, 14, 15, 16, 17, 18], "bonus": 19},
        ]), encoding="utf-8")
        items = read_history(path)
        assert [d.draw_no for d in items] == [9, 5, 3]
        assert items == sort_recent_first(list(reversed(items)))
