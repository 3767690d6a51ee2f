"""Saving and resuming artworks as JSON project files.

A project file holds exactly what the pipeline produced plus coloring
progress: the palette as "#rrggbb" strings and the grid as rows of
[color_index, is_colored] pairs. Progress counters are not stored; they
are rebuilt from the grid when a session resumes.
"""

import json
from pathlib import Path

from models import Cell, InvalidInput, PixelArt

FORMAT_VERSION = 1


def _color_to_hex(color) -> str:
    r, g, b = color
    return f"#{r:02x}{g:02x}{b:02x}"


def _hex_to_color(value: str) -> "tuple[int, int, int]":
    if not isinstance(value, str) or len(value) != 7 or not value.startswith("#"):
        raise InvalidInput(f"Invalid palette color {value!r}")
    try:
        return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)
    except ValueError as e:
        raise InvalidInput(f"Invalid palette color {value!r}") from e


def to_dict(art: PixelArt) -> dict:
    return {
        "version": FORMAT_VERSION,
        "palette": [_color_to_hex(color) for color in art.palette],
        "grid": [
            [[cell.color_index, cell.is_colored] for cell in row] for row in art.grid
        ],
    }


def from_dict(data: dict) -> PixelArt:
    """Rebuild a PixelArt, validating shape and palette indices.

    Raises:
        InvalidInput: If the data does not describe a valid artwork
    """
    try:
        palette = [_hex_to_color(value) for value in data["palette"]]
        raw_grid = data["grid"]
    except (KeyError, TypeError) as e:
        raise InvalidInput(f"Malformed project data: {e}") from e

    if not isinstance(raw_grid, list) or not all(isinstance(r, list) for r in raw_grid):
        raise InvalidInput("Project grid must be a list of rows")
    if not raw_grid or not raw_grid[0]:
        raise InvalidInput("Project grid is empty")
    cols = len(raw_grid[0])

    # Cells are immutable, share one instance per (index, colored) pair
    cells: "dict[tuple[int, bool], Cell]" = {}
    grid = []
    for row_number, raw_row in enumerate(raw_grid):
        if len(raw_row) != cols:
            raise InvalidInput(
                f"Row {row_number} has {len(raw_row)} cells, expected {cols}"
            )
        row = []
        for raw_cell in raw_row:
            try:
                color_index, is_colored = raw_cell
            except (TypeError, ValueError) as e:
                raise InvalidInput(f"Malformed cell {raw_cell!r} in row {row_number}") from e
            # bool is an int subclass, so True/False must be excluded explicitly
            if (
                isinstance(color_index, bool)
                or not isinstance(color_index, int)
                or not 0 <= color_index < len(palette)
            ):
                raise InvalidInput(
                    f"Color index {color_index!r} in row {row_number} "
                    f"is outside the palette"
                )
            if not isinstance(is_colored, bool):
                raise InvalidInput(
                    f"Colored flag {is_colored!r} in row {row_number} must be true or false"
                )
            key = (color_index, is_colored)
            if key not in cells:
                cells[key] = Cell(color_index=key[0], is_colored=key[1])
            row.append(cells[key])
        grid.append(tuple(row))

    return PixelArt(grid=tuple(grid), palette=palette)


def save_project(art: PixelArt, file_path: str | Path) -> Path:
    """Write the artwork to a JSON project file."""
    file_path = Path(file_path)
    with open(file_path, "w") as f:
        json.dump(to_dict(art), f)
    print(f"✓ Saved project to {file_path}")
    return file_path


def load_project(file_path: str | Path) -> PixelArt:
    """Read an artwork from a JSON project file.

    Raises:
        InvalidInput: If the file is not a valid project
        OSError: If the file cannot be read
    """
    with open(file_path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInput(f"Project file is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise InvalidInput("Project file must contain a JSON object")
    return from_dict(data)
