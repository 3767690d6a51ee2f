from coloring import ColoringSession, ColoringStroke
from conftest import make_art
from models import Offset, Size, TransformState

# 4x4 grid in a 40x40 viewport: 10px cells at identity transform
VIEWPORT = Size(40.0, 40.0)
IDENTITY = TransformState()


def _center(row, col):
    return Offset(col * 10 + 5.0, row * 10 + 5.0)


def _session(two_color_art, selected=0):
    session = ColoringSession(two_color_art, selected_color_index=selected)
    published = []
    session.subscribe(published.append)
    return session, published


def test_drag_colors_each_cell_once(two_color_art):
    session, published = _session(two_color_art)
    stroke = ColoringStroke(session)

    assert stroke.begin(_center(0, 0), IDENTITY, VIEWPORT)
    path = [(0, 0), (0, 1), (0, 1), (0, 2), (0, 1), (1, 2)]
    new_cells = [stroke.move(_center(r, c), IDENTITY, VIEWPORT) for r, c in path]
    stroke.end()

    assert new_cells == [None, (0, 1), None, (0, 2), None, (1, 2)]
    assert len(published) == 4
    assert session.snapshot.progress_info.total_colored == 4


def test_drag_over_other_colors_records_mistakes(two_color_art):
    session, _ = _session(two_color_art)
    stroke = ColoringStroke(session)

    stroke.begin(_center(1, 0), IDENTITY, VIEWPORT)
    stroke.move(_center(2, 0), IDENTITY, VIEWPORT)

    assert dict(session.snapshot.wrongly_colored) == {(2, 0): 0}


def test_starting_on_wrong_color_is_not_a_stroke(two_color_art):
    session, published = _session(two_color_art)
    stroke = ColoringStroke(session)

    assert not stroke.begin(_center(3, 3), IDENTITY, VIEWPORT)
    assert stroke.move(_center(0, 0), IDENTITY, VIEWPORT) is None
    assert published == []


def test_starting_on_colored_cell_is_not_a_stroke(two_color_art):
    session, _ = _session(two_color_art)
    session.apply_tap(0, 0)
    stroke = ColoringStroke(session)

    assert not stroke.begin(_center(0, 0), IDENTITY, VIEWPORT)


def test_starting_outside_grid_is_not_a_stroke(two_color_art):
    session, _ = _session(two_color_art)
    stroke = ColoringStroke(session)

    assert not stroke.begin(Offset(-3.0, 5.0), IDENTITY, VIEWPORT)


def test_new_stroke_forgets_previous_cells(two_color_art):
    session, _ = _session(two_color_art)
    stroke = ColoringStroke(session)
    stroke.begin(_center(0, 0), IDENTITY, VIEWPORT)
    stroke.end()

    assert stroke.visited == set()
    assert not stroke.is_coloring
