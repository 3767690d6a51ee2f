import random

import pytest

from coloring import progress
from coloring.session import ColoringSession
from conftest import make_art


def test_from_grid_counts_totals_and_colored():
    art = make_art([[0, 0, 1], [2, 0, 1]], colored=[(0, 0), (1, 2)])

    info = progress.from_grid(art.grid, 3)

    assert info.total_pixels == 6
    assert info.per_color_total == (3, 2, 1)
    assert info.per_color_colored == (1, 1, 0)
    assert info.total_colored == 2


def test_apply_coloring_is_incremental_and_pure():
    art = make_art([[0, 1], [0, 1]])
    before = progress.from_grid(art.grid, 2)

    after = progress.apply_coloring(before, 1)

    assert after.per_color_colored == (0, 1)
    assert after.total_colored == 1
    assert before.per_color_colored == (0, 0)


def test_apply_coloring_refuses_to_overflow():
    art = make_art([[0, 1]], colored=[(0, 0)])
    info = progress.from_grid(art.grid, 2)

    with pytest.raises(ValueError):
        progress.apply_coloring(info, 0)


def test_unused_palette_entries_count_as_done():
    art = make_art([[0, 0]], palette=[(0, 0, 0), (9, 9, 9)])
    state = progress.to_state(progress.from_grid(art.grid, 2))

    assert state.per_color_progress == (0.0, 1.0)
    assert state.global_progress == 0.0


def test_state_fractions():
    art = make_art([[0, 0, 0, 1]], colored=[(0, 0), (0, 3)])
    state = progress.to_state(progress.from_grid(art.grid, 2))

    assert state.global_progress == pytest.approx(0.5)
    assert state.per_color_progress == pytest.approx((1 / 3, 1.0))


@pytest.mark.parametrize("seed", range(12))
def test_incremental_progress_matches_full_rescan(seed):
    rng = random.Random(seed)
    rows, cols, colors = rng.randint(1, 9), rng.randint(1, 9), rng.randint(1, 5)
    indices = [[rng.randrange(colors) for _ in range(cols)] for _ in range(rows)]
    palette = [(i, i, i) for i in range(colors)]
    session = ColoringSession(make_art(indices, palette=palette))

    for _ in range(rng.randint(0, 3 * rows * cols)):
        if rng.random() < 0.2:
            session.select_color(rng.randrange(colors))
        session.apply_tap(rng.randrange(rows), rng.randrange(cols))

        snapshot = session.snapshot
        rescanned = progress.from_grid(snapshot.grid, colors)
        assert snapshot.progress_info == rescanned
        assert snapshot.progress == progress.to_state(rescanned)


@pytest.mark.parametrize("seed", range(5))
def test_resume_matches_any_coloring_order(seed):
    rng = random.Random(seed)
    indices = [[rng.randrange(3) for _ in range(6)] for _ in range(5)]
    cells = [(r, c) for r in range(5) for c in range(6)]
    chosen = rng.sample(cells, 12)

    session = ColoringSession(make_art(indices, palette=[(0, 0, 0)] * 3))
    for r, c in reversed(chosen):
        session.select_color(indices[r][c])
        session.apply_tap(r, c)

    resumed = ColoringSession(make_art(indices, palette=[(0, 0, 0)] * 3, colored=chosen))

    assert resumed.snapshot.progress_info == session.snapshot.progress_info
    assert resumed.snapshot.progress == session.snapshot.progress
