import unittest
from datetime import date, datetime
from habits.domain.WeekKey import WeekKey


class TestWeekKey(unittest.TestCase):

    def test_from_date(self):
        self.assertEqual(WeekKey.from_date(date(2024, 3, 6)), WeekKey(2024, 10))
        self.assertEqual(WeekKey.from_date(datetime(2024, 3, 10, 23, 59)), WeekKey(2024, 10))
        self.assertEqual(WeekKey.from_date(date(2024, 3, 11)), WeekKey(2024, 11))

    def test_iso_year_boundaries(self):
        # Monday 30 Dec 2024 belongs to week 1 of 2025
        self.assertEqual(WeekKey.from_date(date(2024, 12, 30)), WeekKey(2025, 1))
        # Sunday 3 Jan 2021 is still in 2020's week 53
        self.assertEqual(WeekKey.from_date(date(2021, 1, 3)), WeekKey(2020, 53))

    def test_same_week_same_key(self):
        keys = {WeekKey.from_date(date(2024, 3, d)) for d in range(4, 11)}
        self.assertEqual(keys, {WeekKey(2024, 10)})

    def test_dates(self):
        days = WeekKey(2024, 10).dates()
        self.assertEqual(days[0], date(2024, 3, 4))
        self.assertEqual(days[-1], date(2024, 3, 10))
        self.assertEqual(len(days), 7)

    def test_parse_and_label(self):
        self.assertEqual(WeekKey.parse("2024-W10"), WeekKey(2024, 10))
        self.assertEqual(WeekKey.parse("2024-w07"), WeekKey(2024, 7))
        self.assertEqual(WeekKey(2024, 7).label(), "2024-W07")
        self.assertEqual(str(WeekKey(2024, 7)), "2024-W07")

    def test_parse_rejects_bad_input(self):
        for text in ("2024-10", "junk", "2024-W54", "2024-W0"):
            with self.assertRaises(ValueError, msg=text):
                WeekKey.parse(text)


if __name__ == '__main__':
    unittest.main()
