"""Plain-text table rendering for route reports.

Produces a pipe-delimited table with a delimiter row marking column
alignment, readable in a terminal and valid as a Markdown table:

    | VERB  | URI    | ACTION | NAME  |
    | :---- | :----- | :----- | :---- |
    | posts | GET    | /posts | index |
"""

from collections.abc import Sequence

ALIGNMENTS = ("l", "r", "c", "")
MIN_CELL_WIDTH = 3


def _alignments(align: str | Sequence[str], column_count: int) -> list[str]:
    if isinstance(align, str):
        columns = [align] * column_count
    else:
        columns = list(align) + [""] * (column_count - len(align))

    for value in columns:
        if value not in ALIGNMENTS:
            raise ValueError(
                f"Invalid column alignment '{value}'. Expected one of 'l', 'r', 'c' or ''."
            )
    return columns[:column_count]


def _pad(cell: str, width: int, align: str) -> str:
    if align == "r":
        return cell.rjust(width)
    if align == "c":
        return cell.center(width)
    return cell.ljust(width)


def _delimiter(width: int, align: str) -> str:
    if align == "l":
        return ":" + "-" * (width - 1)
    if align == "r":
        return "-" * (width - 1) + ":"
    if align == "c":
        return ":" + "-" * (width - 2) + ":"
    return "-" * width


def render_table(rows: Sequence[Sequence[str]], align: str | Sequence[str] = "l") -> str:
    """Render ``rows`` as an aligned table; the first row is the header.

    Args:
        rows: Header row followed by body rows. Short rows are padded with
            empty cells.
        align: One of ``"l"``, ``"r"``, ``"c"`` or ``""`` for every column,
            or a sequence giving one per column.

    Returns:
        The table as a newline-joined string, or an empty string when there
        are no rows.
    """
    if not rows:
        return ""

    column_count = max(len(row) for row in rows)
    cells = [[str(cell) for cell in row] + [""] * (column_count - len(row)) for row in rows]
    alignments = _alignments(align, column_count)

    widths = [
        max(MIN_CELL_WIDTH, *(len(row[index]) for row in cells))
        for index in range(column_count)
    ]

    def format_row(row: Sequence[str]) -> str:
        padded = (_pad(cell, widths[i], alignments[i]) for i, cell in enumerate(row))
        return "| " + " | ".join(padded) + " |"

    lines = [format_row(cells[0])]
    lines.append(
        "| " + " | ".join(_delimiter(widths[i], alignments[i]) for i in range(column_count)) + " |"
    )
    lines.extend(format_row(row) for row in cells[1:])
    return "\n".join(lines)
