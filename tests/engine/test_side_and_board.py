import dataclasses
import unittest

from royal_ur.engine.board import render
from royal_ur.engine.config import config
from royal_ur.engine.rules import check_sides
from royal_ur.engine.side import Side
from royal_ur.exceptions import InvariantViolation


class TestSide(unittest.TestCase):
    def test_initial_side(self):
        side = Side()
        self.assertEqual(side.remaining, config.TILES)
        self.assertEqual(side.occupied, set())
        self.assertEqual(side.finished, 0)
        self.assertFalse(side.is_complete())
        self.assertTrue(side.has_tile_at(0))
        side.check_invariants()

    def test_from_positions_derives_finished(self):
        side = Side.from_positions(2, {4, 9})
        self.assertEqual(side.finished, 3)
        side.check_invariants()

    def test_conservation_violation(self):
        with self.assertRaises(InvariantViolation):
            Side(remaining=7, occupied={3}, finished=0).check_invariants()

    def test_off_path_positions_rejected(self):
        with self.assertRaises(InvariantViolation):
            Side(remaining=6, occupied={15}, finished=0).check_invariants()
        with self.assertRaises(InvariantViolation):
            Side(remaining=6, occupied={0}, finished=0).check_invariants()

    def test_view_is_frozen_snapshot(self):
        side = Side.from_positions(5, {3, 7})
        view = side.view()
        side.occupied.add(9)
        self.assertEqual(view.occupied, frozenset({3, 7}))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            view.remaining = 0

    def test_view_queries_match_side(self):
        for side in (Side(), Side.from_positions(0, {5, 14}), Side.from_positions(0, set())):
            view = side.view()
            self.assertEqual(view.is_complete(), side.is_complete())
            for position in range(15):
                self.assertEqual(view.has_tile_at(position), side.has_tile_at(position))
        self.assertTrue(Side.from_positions(0, set()).view().is_complete())

    def test_copy_is_independent(self):
        side = Side.from_positions(5, {3})
        twin = side.copy()
        twin.occupied.add(4)
        self.assertEqual(side.occupied, {3})

    def test_check_sides_rejects_shared_lane_collision(self):
        with self.assertRaises(InvariantViolation):
            check_sides(Side.from_positions(6, {9}), Side.from_positions(6, {9}))

    def test_check_sides_allows_private_overlap(self):
        check_sides(Side.from_positions(6, {2}), Side.from_positions(6, {2}))
        check_sides(Side.from_positions(6, {13}), Side.from_positions(6, {13}))


class TestRender(unittest.TestCase):
    def test_empty_board(self):
        self.assertEqual(render(Side(), Side()), "....70..\n........\n....70..")

    def test_in_progress_board(self):
        top = Side(remaining=3, occupied={2, 3, 8}, finished=1)
        bottom = Side(remaining=5, occupied={4, 11}, finished=0)
        self.assertEqual(render(top, bottom), ".TT.31..\n...T..B.\nB...50..")

    def test_private_end_squares(self):
        top = Side.from_positions(5, {13, 14})
        bottom = Side.from_positions(6, {1})
        self.assertEqual(render(top, bottom), "....50TT\n........\n...B60..")


if __name__ == "__main__":
    unittest.main()
