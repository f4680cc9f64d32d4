"""Plain-text layout helpers shared by the command formatters."""

from __future__ import annotations

BOX_INNER_WIDTH = 73
BULLET = "•"


def wrap_words(text: str, width: int) -> list[str]:
    """Greedy word wrap that never splits a word.

    Words are accumulated while the line plus a space plus the next word
    stays within ``width``. A single word longer than ``width`` gets a
    line of its own.
    """
    lines: list[str] = []
    line = ""
    for word in text.split():
        candidate = f"{line} {word}" if line else word
        if len(candidate) <= width:
            line = candidate
            continue
        if line:
            lines.append(line)
        line = word
    if line:
        lines.append(line)
    return lines


def bullets(items: list[str], indent: str = "", width: int | None = None) -> list[str]:
    """One bullet per item, in order. Wrapped continuation lines carry no bullet."""
    lines: list[str] = []
    for item in items:
        wrapped = (wrap_words(item, width) if width else [item]) or [""]
        lines.append(f"{indent}{BULLET} {wrapped[0]}")
        lines.extend(f"{indent}  {rest}" for rest in wrapped[1:])
    return lines


def box(title: str, rows: list[str], inner_width: int = BOX_INNER_WIDTH) -> str:
    """Draw rows inside a titled box, with a blank row above and below.

    Rows wider than the box are broken at spaces onto continuation rows
    with the same indent. A single word wider than the box is left whole.
    """
    label = f" {title} "
    fill = max(inner_width - len(label), 0)
    left = fill // 2
    top = "┌" + "─" * left + label + "─" * (fill - left) + "┐"
    bottom = "└" + "─" * inner_width + "┘"
    fitted = [line for row in ["", *rows, ""] for line in _fit_row(row, inner_width)]
    body = [f"│{line.ljust(inner_width)}│" for line in fitted]
    return "\n".join([top, *body, bottom])


def section(heading: str, blocks: list[str], separator: str = "\n\n") -> str:
    """A headed section: the heading, a blank line, then the blocks."""
    if not blocks:
        return heading
    return f"{heading}\n\n" + separator.join(blocks)


def _fit_row(row: str, width: int) -> list[str]:
    indent = row[: len(row) - len(row.lstrip())]
    lines: list[str] = []
    while len(row) > width:
        cut = row.rfind(" ", len(indent) + 1, width + 1)
        if cut == -1:
            break
        lines.append(row[:cut].rstrip())
        row = indent + row[cut:].lstrip()
    lines.append(row)
    return lines
