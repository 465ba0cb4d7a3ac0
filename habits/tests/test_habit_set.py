import unittest
from habits.domain.Habit import Color, Habit
from habits.domain.HabitSet import HabitSet
from habits.domain.errors import DuplicateNameError, UnknownColorError


class TestHabitSet(unittest.TestCase):

    def setUp(self):
        self.habits = HabitSet()

    def test_add_keeps_insertion_order(self):
        self.habits.add("water", "blue")
        self.habits.add("exercise", Color.RED)
        self.habits.add("breath", "white")
        self.assertEqual(self.habits.names(), ["water", "exercise", "breath"])
        self.assertEqual(self.habits[1].color, Color.RED)

    def test_add_starts_with_empty_completion_record(self):
        habit = self.habits.add("read", "purple")
        self.assertEqual(habit.days, {})
        self.assertFalse(habit.is_done("Monday"))

    def test_duplicate_add_is_rejected_and_set_unchanged(self):
        self.habits.add("x", "blue")
        with self.assertRaises(DuplicateNameError):
            self.habits.add("x", "red")
        self.assertEqual(len(self.habits), 1)
        self.assertEqual(self.habits.get("x").color, Color.BLUE)

    def test_empty_name_is_rejected(self):
        with self.assertRaises(ValueError):
            self.habits.add("", "blue")
        self.assertEqual(len(self.habits), 0)

    def test_whitespace_name_is_rejected(self):
        with self.assertRaises(ValueError):
            self.habits.add("   ", "blue")
        with self.assertRaises(ValueError):
            HabitSet([Habit(" \t", Color.RED)])
        self.assertEqual(len(self.habits), 0)

    def test_name_is_trimmed_before_duplicate_check(self):
        habit = self.habits.add("  yoga ", "green")
        self.assertEqual(habit.name, "yoga")
        with self.assertRaises(DuplicateNameError):
            self.habits.add("yoga ", "red")
        self.assertEqual(self.habits.names(), ["yoga"])

    def test_unknown_color_is_rejected(self):
        with self.assertRaises(UnknownColorError):
            self.habits.add("walk", "pink")
        self.assertNotIn("walk", self.habits)

    def test_remove_existing(self):
        self.habits.add("a", "blue")
        self.habits.add("b", "red")
        self.habits.add("c", "green")
        self.assertTrue(self.habits.remove("b"))
        self.assertEqual(self.habits.names(), ["a", "c"])

    def test_remove_missing_is_noop(self):
        self.habits.add("a", "blue")
        self.habits[0].days["Monday"] = True
        self.assertFalse(self.habits.remove("ghost"))
        self.assertEqual(self.habits.names(), ["a"])
        self.assertTrue(self.habits[0].is_done("Monday"))

    def test_remove_then_add_moves_habit_to_end(self):
        self.habits.add("a", "blue")
        self.habits.add("b", "red")
        self.habits.remove("a")
        self.habits.add("a", "yellow")
        self.assertEqual(self.habits.names(), ["b", "a"])

    def test_identity_is_the_name(self):
        self.assertEqual(Habit("water", "blue"), Habit("water", "red"))
        self.assertNotEqual(Habit("water", "blue"), Habit("tea", "blue"))

    def test_constructor_rejects_duplicates(self):
        with self.assertRaises(DuplicateNameError):
            HabitSet([Habit("a", "blue"), Habit("a", "red")])


class TestColor(unittest.TestCase):

    def test_parse_is_case_insensitive(self):
        self.assertEqual(Color.parse(" LightBlue "), Color.LIGHTBLUE)

    def test_every_color_has_styles(self):
        for color in Color:
            self.assertTrue(color.style)
            self.assertTrue(color.hex.startswith("#"))

    def test_unknown_color(self):
        with self.assertRaises(UnknownColorError):
            Color.parse("chartreuse")


if __name__ == '__main__':
    unittest.main()
