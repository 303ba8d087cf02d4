import unittest
from datetime import date, timedelta
from catering.logic.weeks.week_resolver import choose_week, find_containing_week

FEB_02 = date(2026, 2, 2)
FEB_09 = date(2026, 2, 9)
FEB_16 = date(2026, 2, 16)
JAN_19 = date(2026, 1, 19)


class TestChooseWeek(unittest.TestCase):

    def test_empty_candidates(self):
        self.assertIsNone(choose_week(set(), FEB_09, FEB_09))

    def test_exact_week_for_every_day_of_every_week(self):
        weeks = {FEB_02, FEB_09, FEB_16}
        for week_start in weeks:
            for offset in range(7):
                requested = week_start + timedelta(days=offset)
                # today far away must not matter
                self.assertEqual(choose_week(weeks, requested, date(2030, 1, 1)), week_start)

    def test_future_date_maps_from_todays_week(self):
        weeks = [FEB_02, FEB_09]
        today = date(2026, 2, 10)
        self.assertEqual(choose_week(weeks, date(2026, 3, 4), today), FEB_09)

    def test_cycle_from_earlier_today_week(self):
        weeks = [FEB_02, FEB_16]
        today = date(2026, 2, 3)
        # one week after today's menu week lands between the two published weeks
        self.assertEqual(choose_week(weeks, date(2026, 2, 11), today), FEB_02)
        self.assertEqual(choose_week(weeks, date(2026, 2, 25), today), FEB_16)

    def test_past_offsets_round_toward_negative_infinity(self):
        weeks = {JAN_19, FEB_09}
        today = date(2026, 2, 10)
        # -9 days is -2 weeks: target 2026-01-26, closest published week is 01-19
        self.assertEqual(choose_week(weeks, date(2026, 2, 1), today), JAN_19)

    def test_tie_goes_to_earliest_week(self):
        today = FEB_09
        requested = date(2026, 2, 10)
        self.assertEqual(choose_week([FEB_16, FEB_02], requested, today), FEB_02)
        self.assertEqual(choose_week([FEB_02, FEB_16], requested, today), FEB_02)


class TestFindContainingWeek(unittest.TestCase):

    def test_bounds(self):
        self.assertEqual(find_containing_week([FEB_09], FEB_09 + timedelta(days=6)), FEB_09)
        self.assertIsNone(find_containing_week([FEB_09], FEB_09 + timedelta(days=7)))
        self.assertIsNone(find_containing_week([FEB_09], FEB_09 - timedelta(days=1)))


if __name__ == '__main__':
    unittest.main()
