from __future__ import annotations

import unittest

from apologies.board import Slide, distance_to_home, slides, start_circle, turn_square
from apologies.errors import MalformedPositionError
from apologies.pawn import Pawn, Position
from apologies.types import Color, Zone


def pawn_at(color: Color, position: Position) -> Pawn:
    return Pawn(color=color, index=0, position=position)


def distance(color: Color, square: int) -> int:
    return distance_to_home(pawn_at(color, Position.square(square)))


class PositionTests(unittest.TestCase):
    def test_constructors(self) -> None:
        self.assertTrue(Position.start().is_start)
        self.assertTrue(Position.home().is_home)
        self.assertEqual(Position.safe(3), Position(Zone.SAFE, 3))
        self.assertEqual(Position.square(59), Position(Zone.SQUARE, 59))
        self.assertNotEqual(Position.safe(1), Position.square(1))

    def test_invalid_indexes_are_rejected(self) -> None:
        for build in (
            lambda: Position.safe(-1),
            lambda: Position.safe(5),
            lambda: Position.square(-1),
            lambda: Position.square(60),
            lambda: Position(Zone.START, 1),
            lambda: Position(Zone.SQUARE),
        ):
            with self.assertRaises(ValueError):
                build()

    def test_from_fields(self) -> None:
        self.assertEqual(Position.from_fields(start=True), Position.start())
        self.assertEqual(Position.from_fields(home=True), Position.home())
        self.assertEqual(Position.from_fields(safe=0), Position.safe(0))
        self.assertEqual(Position.from_fields(square=12), Position.square(12))

    def test_from_fields_requires_exactly_one(self) -> None:
        for kwargs in (
            {},
            {"start": True, "home": True},
            {"safe": 1, "square": 1},
            {"home": True, "square": 3},
        ):
            with self.assertRaises(MalformedPositionError):
                Position.from_fields(**kwargs)

    def test_str(self) -> None:
        self.assertEqual(str(Position.start()), "start")
        self.assertEqual(str(Position.home()), "home")
        self.assertEqual(str(Position.safe(2)), "safe 2")
        self.assertEqual(str(Position.square(14)), "square 14")


class PawnTests(unittest.TestCase):
    def test_new_pawn_starts_in_start(self) -> None:
        pawn = Pawn(Color.BLUE, 3)
        self.assertTrue(pawn.position.is_start)
        self.assertEqual(pawn.name, "Blue3")
        self.assertEqual(pawn.key, (Color.BLUE, 3))
        self.assertEqual(str(pawn), "Blue3->start")

    def test_moves(self) -> None:
        pawn = Pawn(Color.RED, 0)
        pawn.move_to_position(Position.square(10))
        self.assertEqual(pawn.position, Position.square(10))
        pawn.move_to_home()
        self.assertTrue(pawn.position.is_home)
        pawn.move_to_start()
        self.assertTrue(pawn.position.is_start)

    def test_copy_is_independent(self) -> None:
        pawn = Pawn(Color.GREEN, 1, Position.safe(2))
        copied = pawn.copy()
        self.assertEqual(copied, pawn)
        copied.move_to_home()
        self.assertEqual(pawn.position, Position.safe(2))


class BoardTopologyTests(unittest.TestCase):
    def test_start_circles_and_turn_squares(self) -> None:
        circles = {Color.RED: 4, Color.YELLOW: 34, Color.GREEN: 49, Color.BLUE: 19}
        turns = {Color.RED: 2, Color.YELLOW: 32, Color.GREEN: 47, Color.BLUE: 17}
        for color in Color:
            self.assertEqual(start_circle(color), Position.square(circles[color]))
            self.assertEqual(turn_square(color), Position.square(turns[color]))

    def test_slides(self) -> None:
        self.assertEqual(slides(Color.RED), [Slide(1, 4), Slide(9, 13)])
        self.assertEqual(slides(Color.YELLOW), [Slide(31, 34), Slide(39, 43)])
        self.assertEqual(slides(Color.GREEN), [Slide(46, 49), Slide(54, 58)])
        self.assertEqual(slides(Color.BLUE), [Slide(16, 19), Slide(24, 28)])


class DistanceToHomeTests(unittest.TestCase):
    def test_home_start_and_safe(self) -> None:
        for color in Color:
            self.assertEqual(distance_to_home(pawn_at(color, Position.home())), 0)
            self.assertEqual(distance_to_home(pawn_at(color, Position.start())), 65)
            for index in range(5):
                pawn = pawn_at(color, Position.safe(index))
                self.assertEqual(distance_to_home(pawn), 5 - index)

    def test_start_circle_is_one_step_from_start(self) -> None:
        for color in Color:
            self.assertEqual(distance_to_home(pawn_at(color, start_circle(color))), 64)

    def test_squares_between_turn_and_circle_need_full_lap(self) -> None:
        self.assertEqual(distance(Color.RED, 3), 65)
        self.assertEqual(distance(Color.BLUE, 18), 65)
        self.assertEqual(distance(Color.YELLOW, 33), 65)
        self.assertEqual(distance(Color.GREEN, 48), 65)

    def test_turn_square(self) -> None:
        for color in Color:
            self.assertEqual(distance_to_home(pawn_at(color, turn_square(color))), 6)

    def test_other_squares(self) -> None:
        self.assertEqual(distance(Color.RED, 1), 7)
        self.assertEqual(distance(Color.RED, 0), 8)
        self.assertEqual(distance(Color.RED, 59), 9)
        self.assertEqual(distance(Color.RED, 9), 59)
        self.assertEqual(distance(Color.BLUE, 0), 23)
        self.assertEqual(distance(Color.GREEN, 40), 13)


if __name__ == "__main__":
    unittest.main()
