from grid_astar.core.grid import Grid
from grid_astar.core.solver import AStarSolver
from grid_astar.gui import renderer as renderer_mod
from grid_astar.gui.renderer import Renderer
from grid_astar.gui.window import Window


class DummyWindow(Window):
    size = (140, 110)

    def __init__(self) -> None:
        self.cells = []
        self.lines = []
        self.text = []
        self.cleared = 0

    def fill_cell(self, rect, colour, outline=(0, 0, 0)) -> None:
        self.cells.append((rect, colour))

    def draw_line(self, start, end, colour=(255, 255, 255), width=2) -> None:
        self.lines.append((start, end))

    def draw_text(self, text, x, y, colour=(255, 255, 255)) -> None:
        self.text.append(text)

    def clear(self, colour=(255, 255, 255)) -> None:
        self.cleared += 1

    def refresh(self) -> None:  # pragma: no cover - not used
        pass


def _solved():
    grid = Grid.from_layout(["..#.", "...."])
    solver = AStarSolver()
    solver.initialize(grid, grid.get_cell(0, 0), grid.get_cell(3, 1))
    solver.run()
    return grid, solver


def test_cell_geometry_uses_padding():
    grid, _ = _solved()
    renderer = Renderer(DummyWindow(), padding=20)
    assert renderer.cell_size(grid) == (25.0, 35.0)


def test_renderer_paints_layers_in_order():
    grid, solver = _solved()
    window = DummyWindow()
    Renderer(window, padding=20).update(grid, solver)

    assert window.cleared == 1
    base = window.cells[: len(grid)]
    assert sum(1 for _, colour in base if colour == renderer_mod.WALL_COLOUR) == 1
    layered = [colour for _, colour in window.cells[len(grid):]]
    expected = (
        [renderer_mod.CLOSED_COLOUR] * len(solver.closed_set)
        + [renderer_mod.OPEN_COLOUR] * len(solver.open_set)
        + [renderer_mod.PATH_COLOUR] * len(solver.current_path)
    )
    assert layered == expected
    assert window.cells[-1][0] == (20.0, 20.0, 25.0, 35.0)  # start is drawn last
    assert len(window.lines) == len(solver.current_path) - 1
    assert window.lines[0][0] == (20 + 3 * 25 + 12.5, 20 + 35 + 17.5)
    assert "Solution found!" in window.text


def test_renderer_skips_when_window_too_small():
    grid, solver = _solved()
    window = DummyWindow()
    window.size = (30, 30)
    Renderer(window, padding=20).update(grid, solver)
    assert window.cells == [] and window.cleared == 0


def test_fps_text_optional():
    grid, solver = _solved()
    window = DummyWindow()
    renderer = Renderer(window)
    renderer.show_fps = True
    renderer.update(grid, solver)
    assert any("FPS" in t for t in window.text)
