"""Tests for cursor/viewport movement, wraparound and boundary skipping."""

from __future__ import annotations

import random
import unittest

from lazydirs.list_model.navigable import NavigableList
from lazydirs.list_model.types import Entry, GroupBoundary, ListState


def _entries(count: int, prefix: str = "e") -> tuple[Entry, ...]:
    return tuple(Entry(key=f"/{prefix}{idx}", display_name=f"{prefix}{idx}") for idx in range(count))


def _list(displayed, height: int = 3, cursor: int = 0, offset: int = 0) -> NavigableList:
    return NavigableList(
        ListState(
            all_entries=displayed,
            displayed=displayed,
            cursor=cursor,
            viewport_offset=offset,
            viewport_height=height,
        )
    )


class NavigableListTests(unittest.TestCase):
    def assertInvariants(self, nav: NavigableList) -> None:
        state = nav.state
        count = len(state.displayed)
        if count == 0:
            self.assertEqual((state.cursor, state.viewport_offset), (0, 0))
            return
        self.assertTrue(0 <= state.cursor < count)
        self.assertTrue(0 <= state.viewport_offset <= max(0, count - state.viewport_height))
        self.assertTrue(state.viewport_offset <= state.cursor <= state.viewport_offset + state.viewport_height - 1)
        if any(isinstance(item, Entry) for item in state.displayed):
            self.assertIsInstance(state.displayed[state.cursor], Entry)

    def test_move_down_from_last_wraps_to_top(self) -> None:
        nav = _list(_entries(5), height=3, cursor=4, offset=2)

        nav.move_down()

        self.assertEqual(nav.state.cursor, 0)
        self.assertEqual(nav.state.viewport_offset, 0)

    def test_move_up_from_top_wraps_to_bottom(self) -> None:
        nav = _list(_entries(5), height=3)

        nav.move_up()

        self.assertEqual(nav.state.cursor, 4)
        self.assertEqual(nav.state.viewport_offset, 2)

    def test_wrap_to_bottom_on_short_list_keeps_offset_zero(self) -> None:
        nav = _list(_entries(2), height=5)

        nav.move_up()

        self.assertEqual((nav.state.cursor, nav.state.viewport_offset), (1, 0))

    def test_single_element_list_wraps_to_itself(self) -> None:
        nav = _list(_entries(1), height=3)

        nav.move_down()
        self.assertEqual(nav.state.cursor, 0)
        nav.move_up()
        self.assertEqual(nav.state.cursor, 0)

    def test_move_down_scrolls_one_line_at_a_time(self) -> None:
        nav = _list(_entries(6), height=3)

        offsets = []
        for _ in range(4):
            nav.move_down()
            offsets.append(nav.state.viewport_offset)

        self.assertEqual(nav.state.cursor, 4)
        self.assertEqual(offsets, [0, 0, 1, 2])

    def test_move_up_pulls_offset_to_cursor(self) -> None:
        nav = _list(_entries(6), height=3, cursor=3, offset=3)

        nav.move_up()

        self.assertEqual((nav.state.cursor, nav.state.viewport_offset), (2, 2))

    def test_moves_skip_boundaries(self) -> None:
        displayed = (
            Entry("/a", "a"),
            GroupBoundary("Pinned"),
            Entry("/b", "b"),
            GroupBoundary("Disks"),
        )
        nav = _list(displayed, height=2)

        nav.move_down()
        self.assertEqual(nav.state.cursor, 2)
        nav.move_down()
        self.assertEqual(nav.state.cursor, 0)
        self.assertEqual(nav.state.viewport_offset, 0)
        nav.move_up()
        self.assertEqual(nav.state.cursor, 2)
        self.assertInvariants(nav)

    def test_wrap_up_skips_trailing_boundaries(self) -> None:
        displayed = (Entry("/a", "a"), GroupBoundary("Pinned"), GroupBoundary("Disks"))
        nav = _list(displayed, height=1)

        nav.move_up()

        self.assertEqual((nav.state.cursor, nav.state.viewport_offset), (0, 0))

    def test_replace_resets_and_skips_leading_boundary(self) -> None:
        nav = _list(_entries(5), height=3, cursor=4, offset=2)
        target = Entry("/c", "C")

        nav.replace((GroupBoundary("Pinned"), target))

        self.assertEqual(nav.state.cursor, 1)
        self.assertEqual(nav.state.viewport_offset, 0)
        self.assertIs(nav.selected(), target)

    def test_replace_with_only_boundaries_selects_nothing(self) -> None:
        nav = _list(_entries(3))

        nav.replace((GroupBoundary("Pinned"), GroupBoundary("Disks")))

        self.assertEqual(nav.state.cursor, 0)
        self.assertIsNone(nav.selected())
        self.assertIsNone(nav.cursor_row())
        self.assertFalse(nav.move_down())
        self.assertFalse(nav.move_up())

    def test_empty_list_moves_are_noops(self) -> None:
        nav = _list(())

        self.assertFalse(nav.move_down())
        self.assertFalse(nav.move_up())
        self.assertIsNone(nav.selected())
        self.assertEqual(nav.visible_rows(), ())

    def test_resize_keeps_offset_when_cursor_still_visible(self) -> None:
        nav = _list(_entries(10), height=3, cursor=5, offset=4)

        nav.resize(4)

        self.assertEqual((nav.state.cursor, nav.state.viewport_offset), (5, 4))

    def test_resize_pulls_offset_to_keep_cursor_visible(self) -> None:
        nav = _list(_entries(10), height=5, cursor=8, offset=4)

        nav.resize(2)

        self.assertEqual(nav.state.viewport_offset, 7)
        self.assertInvariants(nav)

    def test_resize_growing_clamps_offset_into_range(self) -> None:
        nav = _list(_entries(10), height=3, cursor=9, offset=7)

        nav.resize(8)

        self.assertEqual(nav.state.viewport_offset, 2)
        self.assertInvariants(nav)

    def test_resize_never_below_one_row(self) -> None:
        nav = _list(_entries(4))

        nav.resize(0)

        self.assertEqual(nav.state.viewport_height, 1)

    def test_out_of_range_state_is_clamped_on_construction(self) -> None:
        nav = _list(_entries(3), height=2, cursor=9, offset=9)

        self.assertInvariants(nav)
        self.assertEqual(nav.state.cursor, 2)

    def test_visible_rows_and_cursor_row(self) -> None:
        entries = _entries(6)
        nav = _list(entries, height=3, cursor=4, offset=3)

        self.assertEqual(nav.visible_rows(), entries[3:6])
        self.assertEqual(nav.cursor_row(), 1)

    def test_random_operation_sequences_hold_invariants(self) -> None:
        rng = random.Random(1234)
        for _ in range(50):
            items = []
            for idx in range(rng.randint(0, 12)):
                if rng.random() < 0.25:
                    items.append(GroupBoundary(f"g{idx}"))
                else:
                    items.append(Entry(f"/{idx}", f"n{idx}"))
            nav = _list(tuple(items), height=rng.randint(1, 5))
            self.assertInvariants(nav)
            for _ in range(40):
                op = rng.choice(("up", "down", "resize", "replace"))
                if op == "up":
                    nav.move_up()
                elif op == "down":
                    nav.move_down()
                elif op == "resize":
                    nav.resize(rng.randint(1, 6))
                else:
                    nav.replace(tuple(item for item in items if rng.random() < 0.7))
                self.assertInvariants(nav)


if __name__ == "__main__":
    unittest.main()
