import unittest

from acreage.core.constants import Cell
from acreage.core.exceptions import AcreageError, SearchInvariantError
from acreage.core.models import Area, Move
from acreage.engine.generator import LoopGenerator, SearchConfig
from acreage.engine.grid import SlantGrid


def _frame(generator: LoopGenerator):
    return (
        generator.grid.copy(),
        [list(row) for row in generator.placed],
        generator.head,
        generator.placed_cnt,
        generator.inner_cells,
        list(generator.moves),
    )


class MoveLogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.generator = LoopGenerator(SearchConfig(target=Area(2)))

    def test_place_unplace_round_trip(self) -> None:
        gen = self.generator
        gen.start = gen.head = (1, 0)
        before = _frame(gen)

        gen.place(0, 0, Cell.FORWARD, 0, 1)
        gen.place(0, 1, Cell.BACKWARD, 1, 2)
        gen.place(1, 1, Cell.FORWARD, 2, 1)
        self.assertEqual(gen.placed_cnt, 3)
        self.assertEqual(len(gen.moves), gen.placed_cnt)
        self.assertEqual(gen.inner_cells, 1)
        self.assertEqual(gen.head, (2, 1))
        self.assertEqual(gen.moves[-1], Move((1, 1), (1, 2)))

        for _ in range(3):
            gen.unplace()
        self.assertEqual(_frame(gen), before)
        self.assertTrue(gen.grid.is_empty())

    def test_double_place_is_fatal(self) -> None:
        self.generator.place(3, 3, Cell.BACKWARD, 4, 4)
        with self.assertRaises(SearchInvariantError):
            self.generator.place(3, 3, Cell.FORWARD, 3, 4)

    def test_unplace_without_moves_is_fatal(self) -> None:
        with self.assertRaises(SearchInvariantError):
            self.generator.unplace()

    def test_unplace_of_unmarked_cell_is_fatal(self) -> None:
        self.generator.place(2, 4, Cell.FORWARD, 2, 5)
        self.generator.placed[2][4] = False
        with self.assertRaises(SearchInvariantError):
            self.generator.unplace()


class SearchConfigTests(unittest.TestCase):
    def test_rejects_out_of_range_bounds(self) -> None:
        with self.assertRaises(ValueError):
            SearchConfig(target=Area(2), max_length=50)
        with self.assertRaises(ValueError):
            SearchConfig(target=Area(2), max_inner_cells=-1)
        with self.assertRaises(ValueError):
            SearchConfig(target=Area(2), progress_interval=0)


class BoundedSearchTests(unittest.TestCase):
    def test_unit_diamonds_within_length_four(self) -> None:
        result = LoopGenerator(SearchConfig(target=Area(2), max_length=4)).generate()
        self.assertEqual(result.layout_count, 36)
        self.assertEqual(result.valid_cnt, 36 * 6)
        self.assertEqual(len({tuple(grid.to_jsonable()) for grid in result.valid_grids}), 36)
        self.assertEqual(set(result.lengths()), {4})

    def test_inner_cell_bound_prunes(self) -> None:
        # Only the starting and closing segments escape the bound, so the one
        # diamond whose other two cells sit on the outer ring survives.
        result = LoopGenerator(
            SearchConfig(target=Area(2), max_inner_cells=0, max_length=4)
        ).generate()
        self.assertEqual(result.layout_count, 1)
        self.assertEqual(result.valid_cnt, 6)
        expected = SlantGrid.from_strings(
            ["...../\\", ".....\\/", ".......", ".......", ".......", ".......", "......."]
        )
        self.assertEqual(result.valid_grids, [expected])

    def test_progress_is_logged_at_interval(self) -> None:
        with self.assertLogs("acreage.engine.generator", "INFO") as captured:
            result = LoopGenerator(
                SearchConfig(target=Area(2), max_length=4, progress_interval=100)
            ).generate()
        progress = [line for line in captured.output if "nodes visited" in line]
        self.assertEqual(len(progress), result.nodes_visited // 100)
        self.assertGreater(len(progress), 0)

    def test_target_larger_than_grid_finds_nothing(self) -> None:
        result = LoopGenerator(SearchConfig(target=Area(50))).generate()
        self.assertEqual(result.valid_grids, [])
        self.assertEqual(result.valid_cnt, 0)
        self.assertEqual(result.nodes_visited, 0)

    def test_generator_is_single_use(self) -> None:
        generator = LoopGenerator(SearchConfig(target=Area(60)))
        generator.generate()
        with self.assertRaises(AcreageError):
            generator.generate()


class ExhaustiveSmallAreaTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.generator = LoopGenerator(SearchConfig(target=Area(2), max_inner_cells=49, max_length=49))
        cls.result = cls.generator.generate()

    def test_finds_every_unit_diamond(self) -> None:
        self.assertEqual(self.result.layout_count, 36)
        self.assertEqual(self.result.valid_cnt, 216)
        diamond = SlantGrid.from_strings(
            ["/\\.....", "\\/.....", ".......", ".......", ".......", ".......", "......."]
        )
        self.assertIn(diamond, self.result.valid_grids)

    def test_every_layout_matches_target(self) -> None:
        for grid in self.result.valid_grids:
            self.assertEqual(grid.loop_area(), Area(2))

    def test_frame_is_unwound_after_search(self) -> None:
        self.assertTrue(self.generator.grid.is_empty())
        self.assertEqual(self.generator.moves, [])
        self.assertEqual(self.generator.placed_cnt, 0)
        self.assertEqual(self.generator.inner_cells, 0)
        self.assertTrue(all(all(row) for row in self.generator.placed))
        self.assertGreater(self.result.nodes_visited, 36)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
