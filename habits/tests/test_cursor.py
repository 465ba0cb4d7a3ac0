import unittest
from habits.domain.Cursor import Cursor, Direction
from habits.domain.WeeklyGrid import WeeklyGrid


class TestCursor(unittest.TestCase):

    def test_initial_position(self):
        self.assertEqual(Cursor(3).position, (1, 0))
        self.assertEqual(Cursor(0).position, (0, 0))

    def test_down_skips_spacers_and_stops_at_last_habit(self):
        cursor = Cursor(3)
        cursor.down()
        self.assertEqual(cursor.position, (3, 0))
        cursor.down()
        self.assertEqual(cursor.position, (5, 0))
        cursor.down()
        self.assertEqual(cursor.position, (5, 0))

    def test_up_skips_spacers_and_stops_at_first_habit(self):
        cursor = Cursor(3)
        cursor.row = 5
        cursor.up()
        self.assertEqual(cursor.row, 3)
        cursor.up()
        self.assertEqual(cursor.row, 1)
        cursor.up()
        self.assertEqual(cursor.row, 1)

    def test_from_even_row_moves_one(self):
        cursor = Cursor(3)
        cursor.row = 2
        cursor.down()
        self.assertEqual(cursor.row, 3)
        cursor.row = 2
        cursor.up()
        self.assertEqual(cursor.row, 1)

    def test_header_moves_down_to_first_habit(self):
        cursor = Cursor(2)
        cursor.row = 0
        cursor.up()
        self.assertEqual(cursor.row, 0)
        cursor.down()
        self.assertEqual(cursor.row, 1)

    def test_vertical_moves_never_rest_on_spacer(self):
        for n in range(1, 7):
            for start in range(n):
                for direction in (Direction.UP, Direction.DOWN):
                    cursor = Cursor(n)
                    cursor.row = 2 * start + 1
                    for _ in range(n + 1):
                        cursor.move(direction)
                        self.assertEqual(cursor.row % 2, 1, f"n={n} start={start} {direction}")

    def test_empty_grid_stays_on_header(self):
        cursor = Cursor(0)
        for direction in Direction:
            cursor.move(direction)
        self.assertEqual(cursor.row, 0)

    def test_horizontal_bounds(self):
        cursor = Cursor(1)
        cursor.left()
        self.assertEqual(cursor.col, 0)
        for _ in range(10):
            cursor.right()
        self.assertEqual(cursor.col, 7)
        cursor.left()
        self.assertEqual(cursor.col, 6)

    def test_axes_are_independent(self):
        cursor = Cursor(3)
        cursor.right()
        cursor.right()
        cursor.down()
        self.assertEqual(cursor.position, (3, 2))
        cursor.left()
        self.assertEqual(cursor.position, (3, 1))

    def test_target(self):
        cursor = Cursor(3)
        self.assertIsNone(cursor.target())  # name column
        cursor.right()
        self.assertEqual(cursor.target(), (0, "Monday"))
        cursor.down()
        for _ in range(6):
            cursor.right()
        self.assertEqual(cursor.target(), (1, "Sunday"))
        cursor.row = 2
        self.assertIsNone(cursor.target())

    def test_target_matches_grid_rows(self):
        grid = WeeklyGrid.default()
        cursor = Cursor(grid.habit_count())
        cursor.right()
        for i in range(grid.habit_count()):
            self.assertEqual(cursor.row, WeeklyGrid.row_for_habit(i))
            self.assertEqual(cursor.target(), (i, "Monday"))
            cursor.down()
        cursor.row = 0
        self.assertIsNone(cursor.target())

    def test_reset_after_rebuild(self):
        cursor = Cursor(3)
        cursor.down()
        cursor.right()
        cursor.reset(4)
        self.assertEqual(cursor.position, (1, 0))
        self.assertEqual(cursor.max_row, 7)
        cursor.reset(0)
        self.assertEqual(cursor.position, (0, 0))


if __name__ == '__main__':
    unittest.main()
