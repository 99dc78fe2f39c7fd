import unittest

from mazesolver.analysis import inspect_maze
from mazesolver.generator import MazeGenerator, Phase, generate_maze
from mazesolver.grid import Grid


def first_index(count: int) -> int:
    return 0


class RecordingIndex:
    def __init__(self) -> None:
        self.calls = []

    def __call__(self, count: int) -> int:
        self.calls.append(count)
        return count - 1


class GenerationTests(unittest.TestCase):
    def test_generated_mazes_are_spanning_trees(self) -> None:
        for rows, cols in ((1, 1), (1, 6), (6, 1), (2, 2), (5, 7), (6, 6), (12, 9)):
            for seed in (0, 1, 42):
                with self.subTest(rows=rows, cols=cols, seed=seed):
                    grid = generate_maze(rows, cols, seed=seed)
                    report = inspect_maze(grid)
                    self.assertEqual(report.passages, rows * cols - 1)
                    self.assertTrue(report.connected)
                    self.assertTrue(report.acyclic)
                    self.assertTrue(report.perfect)
                    self.assertTrue(all(cell.visited for cell in grid.cells()))

    def test_single_cell_maze_has_no_passages(self) -> None:
        grid = generate_maze(1, 1, seed=3)
        self.assertEqual(grid.passages(), [])
        self.assertTrue(grid.cell_at(0, 0).visited)

    def test_same_seed_reproduces_layout(self) -> None:
        first = generate_maze(10, 8, seed=123)
        second = generate_maze(10, 8, seed=123)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_injected_index_gives_known_layout(self) -> None:
        grid = Grid(2, 2)
        MazeGenerator(first_index).generate(grid)
        self.assertEqual(
            grid.passages(),
            [((0, 0), (0, 1)), ((0, 1), (1, 1)), ((1, 0), (1, 1))],
        )

    def test_random_draw_only_when_candidates_exist(self) -> None:
        recorder = RecordingIndex()
        grid = Grid(4, 5)
        MazeGenerator(recorder).generate(grid)
        self.assertEqual(len(recorder.calls), 4 * 5 - 1)
        self.assertTrue(all(count >= 1 for count in recorder.calls))
        self.assertTrue(inspect_maze(grid).perfect)

    def test_carved_grid_is_rejected(self) -> None:
        grid = generate_maze(4, 4, seed=6)
        before = grid.to_dict()
        with self.assertRaises(ValueError):
            MazeGenerator(seed=6).generate(grid)
        self.assertEqual(grid.to_dict(), before)

        partial = Grid(3, 3)
        partial.remove_wall_between(partial.cell_at(0, 0), partial.cell_at(0, 1))
        with self.assertRaises(ValueError):
            MazeGenerator(seed=6).start(partial)

    def test_out_of_range_index_is_rejected(self) -> None:
        generator = MazeGenerator(lambda count: count)
        state = generator.start(Grid(3, 3))
        with self.assertRaises(ValueError):
            generator.step(state)


class SteppingTests(unittest.TestCase):
    def test_start_marks_origin_and_evaluates_phase(self) -> None:
        grid = Grid(3, 3)
        state = MazeGenerator(seed=5).start(grid)
        self.assertIs(state.current, grid.cell_at(0, 0))
        self.assertTrue(state.current.visited)
        self.assertEqual(state.stack, [])
        self.assertIs(state.phase, Phase.CARVING)

    def test_single_cell_starts_done(self) -> None:
        generator = MazeGenerator(seed=5)
        state = generator.start(Grid(1, 1))
        self.assertIs(state.phase, Phase.DONE)
        self.assertTrue(state.done)
        generator.step(state)
        self.assertEqual(state.steps, 0)

    def test_phases_for_two_by_two(self) -> None:
        grid = Grid(2, 2)
        generator = MazeGenerator(first_index)
        state = generator.start(grid)

        for expected in ((0, 1), (1, 1), (1, 0)):
            self.assertIs(state.phase, Phase.CARVING)
            state = generator.step(state)
            self.assertEqual(state.current.coord, expected)

        self.assertIs(state.phase, Phase.BACKTRACKING)
        self.assertEqual([cell.coord for cell in state.stack], [(0, 0), (0, 1), (1, 1)])

        for expected in ((1, 1), (0, 1), (0, 0)):
            state = generator.step(state)
            self.assertEqual(state.current.coord, expected)

        self.assertIs(state.phase, Phase.DONE)
        self.assertEqual(state.steps, 6)
        self.assertEqual(state.carved, 3)

    def test_stepping_matches_generate(self) -> None:
        stepped = Grid(7, 5)
        generator = MazeGenerator(seed=99)
        state = generator.start(stepped)
        while not state.done:
            generator.step(state)

        direct = Grid(7, 5)
        MazeGenerator(seed=99).generate(direct)
        self.assertEqual(stepped.to_dict(), direct.to_dict())

    def test_step_count_is_bounded(self) -> None:
        for rows, cols in ((1, 1), (3, 8), (8, 8)):
            with self.subTest(rows=rows, cols=cols):
                generator = MazeGenerator(seed=7)
                state = generator.start(Grid(rows, cols))
                while not state.done:
                    generator.step(state)
                self.assertLessEqual(state.steps, 2 * rows * cols)
                self.assertEqual(state.carved, rows * cols - 1)
                self.assertEqual(state.stack, [])


if __name__ == "__main__":
    unittest.main()
