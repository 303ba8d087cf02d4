import unittest
from datetime import date, timedelta
from catering.domain.MenuDocument import MenuDocument
from catering.logic.index.menu_index_builder import (
    build_menu_index,
    lookup,
    merge_indexes,
    parse_weekly_menu,
)
from catering.tests.menu_samples import FOUR_GROUP_LUNCH_MENU, SAMPLE_MENU, UNDATED_MENU, WEEK_START


class TestParseWeeklyMenu(unittest.TestCase):

    def test_full_week_has_nineteen_entries(self):
        index = parse_weekly_menu(SAMPLE_MENU, WEEK_START)
        expected = set()
        for offset in range(5):
            day = (WEEK_START + timedelta(days=offset)).isoformat()
            expected.update({f"{day}-breakfast", f"{day}-lunch"})
        for offset in range(7):
            expected.add(f"{(WEEK_START + timedelta(days=offset)).isoformat()}-dinner")
        expected.update({"2026-02-14-brunch", "2026-02-15-brunch"})
        self.assertEqual(set(index), expected)
        self.assertEqual(len(index), 19)

    def test_entry_texts(self):
        index = parse_weekly_menu(SAMPLE_MENU, WEEK_START)
        self.assertEqual(index["2026-02-09-breakfast"], "Full English")
        self.assertEqual(index["2026-02-13-breakfast"], "Eggs Benedict")
        self.assertEqual(index["2026-02-14-brunch"], "Brunch buffet available")
        self.assertEqual(index["2026-02-15-brunch"], "Brunch buffet available")
        self.assertEqual(index["2026-02-09-lunch"], "Roast chicken\nwith gravy")
        self.assertEqual(index["2026-02-11-lunch"], "Fish pie\npeas")
        self.assertEqual(index["2026-02-13-lunch"], "Pizza")
        self.assertEqual(index["2026-02-09-dinner"], "Chilli con carne")
        self.assertEqual(index["2026-02-15-dinner"], "Roast beef\nYorkshire pudding")

    def test_parsing_is_idempotent(self):
        first = parse_weekly_menu(SAMPLE_MENU, WEEK_START)
        second = parse_weekly_menu(SAMPLE_MENU, WEEK_START)
        self.assertEqual(first, second)
        self.assertEqual(list(first.items()), list(second.items()))

    def test_lunch_block_mismatch_uses_single_lines(self):
        index = parse_weekly_menu(FOUR_GROUP_LUNCH_MENU, WEEK_START)
        self.assertEqual(index["2026-02-09-lunch"], "Roast chicken")
        self.assertEqual(index["2026-02-10-lunch"], "with gravy")
        self.assertEqual(index["2026-02-13-lunch"], "Vegetable curry")
        for key, value in index.items():
            self.assertNotIn("\n", value, key)

    def test_empty_text_gives_empty_map(self):
        self.assertEqual(parse_weekly_menu("", WEEK_START), {})


class TestBuildMenuIndex(unittest.TestCase):

    def test_undated_document_uses_week_phrase(self):
        index = build_menu_index([MenuDocument(UNDATED_MENU, source="next.pdf")])
        self.assertEqual(index["2026-02-20-lunch"], "Calzone")
        self.assertEqual(len(index), 19)

    def test_document_without_week_is_skipped(self):
        docs = [
            MenuDocument(SAMPLE_MENU, WEEK_START, "this.pdf"),
            MenuDocument("Breakfast Breakfast Breakfast\nToast", source="undated.pdf"),
        ]
        with self.assertLogs("catering.logic.index.menu_index_builder", level="WARNING"):
            index = build_menu_index(docs)
        self.assertEqual(len(index), 19)

    def test_weeks_merge_and_later_wins(self):
        docs = [
            MenuDocument(SAMPLE_MENU, WEEK_START),
            MenuDocument(UNDATED_MENU),
            MenuDocument(SAMPLE_MENU.replace("Pizza", "Pasta bake"), WEEK_START),
        ]
        index = build_menu_index(docs)
        self.assertEqual(len(index), 38)
        self.assertEqual(index["2026-02-13-lunch"], "Pasta bake")

    def test_merge_indexes(self):
        merged = merge_indexes([{"a": "1", "b": "2"}, {"b": "3"}])
        self.assertEqual(merged, {"a": "1", "b": "3"})


class TestLookup(unittest.TestCase):

    def setUp(self):
        self.index = parse_weekly_menu(SAMPLE_MENU, WEEK_START)

    def test_direct_key(self):
        self.assertEqual(lookup(self.index, date(2026, 2, 11), "dinner", WEEK_START), "Mushroom risotto")

    def test_period_is_case_insensitive(self):
        self.assertEqual(lookup(self.index, date(2026, 2, 10), "DINNER"), "Sausages and mash")

    def test_weekday_mapped_into_resolved_week(self):
        # Wednesday 2026-03-04 served from the week of 2026-02-09
        self.assertEqual(lookup(self.index, date(2026, 3, 4), "lunch", WEEK_START), "Fish pie\npeas")
        self.assertEqual(lookup(self.index, date(2026, 3, 8), "brunch", WEEK_START), "Brunch buffet available")

    def test_miss(self):
        self.assertIsNone(lookup(self.index, date(2026, 2, 14), "lunch", WEEK_START))
        self.assertIsNone(lookup(self.index, date(2026, 2, 10), "supper", WEEK_START))
        self.assertIsNone(lookup(self.index, date(2026, 3, 4), "lunch"))


if __name__ == '__main__':
    unittest.main()
