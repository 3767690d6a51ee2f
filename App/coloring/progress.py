"""Completion counters for a coloring session.

AIDEV-NOTE: Pure functions over frozen ProgressInfo snapshots. from_grid
is the full O(rows * cols) scan used at session start or resume;
apply_coloring is the O(1) incremental path used per tap. The two must
always agree (see tests/test_progress.py).
"""

from models import Grid, ProgressInfo, ProgressState


def from_grid(grid: Grid, palette_size: int) -> ProgressInfo:
    """Count cells per color, and how many of them are already colored."""
    per_color_total = [0] * palette_size
    per_color_colored = [0] * palette_size
    total_pixels = 0

    for row in grid:
        for cell in row:
            per_color_total[cell.color_index] += 1
            if cell.is_colored:
                per_color_colored[cell.color_index] += 1
        total_pixels += len(row)

    return ProgressInfo(
        total_pixels=total_pixels,
        per_color_total=tuple(per_color_total),
        per_color_colored=tuple(per_color_colored),
        total_colored=sum(per_color_colored),
    )


def apply_coloring(info: ProgressInfo, color_index: int) -> ProgressInfo:
    """Counters after one more cell of color_index has been colored.

    Raises:
        ValueError: If every cell of that color is already counted
    """
    colored = info.per_color_colored[color_index]
    if colored >= info.per_color_total[color_index]:
        raise ValueError(
            f"Color {color_index} already has all "
            f"{info.per_color_total[color_index]} cells colored"
        )

    per_color_colored = list(info.per_color_colored)
    per_color_colored[color_index] = colored + 1
    return ProgressInfo(
        total_pixels=info.total_pixels,
        per_color_total=info.per_color_total,
        per_color_colored=tuple(per_color_colored),
        total_colored=info.total_colored + 1,
    )


def color_progress(info: ProgressInfo, color_index: int) -> float:
    """Fraction of one color's cells that are colored.

    Unused palette entries count as done so they never block completion.
    """
    total = info.per_color_total[color_index]
    if total == 0:
        return 1.0
    return info.per_color_colored[color_index] / total


def to_state(info: ProgressInfo) -> ProgressState:
    """Normalized view of the counters."""
    if info.total_pixels == 0:
        global_progress = 1.0
    else:
        global_progress = info.total_colored / info.total_pixels

    return ProgressState(
        global_progress=global_progress,
        per_color_progress=tuple(
            color_progress(info, i) for i in range(len(info.per_color_total))
        ),
    )


def is_color_done(info: ProgressInfo, color_index: int) -> bool:
    return info.per_color_colored[color_index] == info.per_color_total[color_index]
