"""Binary mask to SVG encoding.

AIDEV-NOTE: The drawing is inverted on purpose. The canvas is one rectangle
in the foreground color and only background runs are drawn on top, one
<rect> per horizontal run. Dithered masks are mostly foreground at high
thresholds, so this keeps the rect count low, and for cutting/engraving the
background shapes are the material to remove.
"""

import numpy as np
import svg

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _number(value: float) -> "int | float":
    """Drop the decimal point from whole numbers so 8.0 renders as 8."""
    if float(value).is_integer():
        return int(value)
    return value


def background_runs(mask, width: int, height: int) -> "list[tuple[int, int, int]]":
    """Find maximal horizontal runs of background (False) cells.

    Args:
        mask: Row-major booleans, length width * height
        width: Mask width in cells
        height: Mask height in cells

    Returns:
        List of (row, start_x, run_length), in row-major order
    """
    cells = np.asarray(mask, dtype=bool).ravel().tolist()
    runs = []
    for y in range(height):
        row_start = y * width
        x = 0
        while x < width:
            if cells[row_start + x]:
                x += 1
                continue
            start_x = x
            while x < width and not cells[row_start + x]:
                x += 1
            runs.append((y, start_x, x - start_x))
    return runs


def mask_to_svg(
    mask,
    width: int,
    height: int,
    foreground_color: str,
    background_color: str,
    scale: float = 1,
) -> str:
    """Encode a dither mask as a standalone SVG document.

    Args:
        mask: Row-major booleans (True = foreground), length width * height
        width: Mask width in cells
        height: Mask height in cells
        foreground_color: Fill of the base canvas rect, used verbatim
        background_color: Fill of the run rects, used verbatim
        scale: Size of one mask cell in SVG units (positive)

    Returns:
        SVG content as string, with XML header
    """
    svg_width = _number(width * scale)
    svg_height = _number(height * scale)
    cell = _number(scale)

    run_rects: list[svg.Element] = [
        svg.Rect(
            x=_number(start_x * scale),
            y=_number(y * scale),
            width=_number(length * scale),
            height=cell,
            fill=background_color,
        )
        for y, start_x, length in background_runs(mask, width, height)
    ]

    document = svg.SVG(
        width=svg_width,
        height=svg_height,
        viewBox=svg.ViewBoxSpec(0, 0, svg_width, svg_height),
        elements=[
            svg.Rect(x=0, y=0, width=svg_width, height=svg_height, fill=foreground_color),
            svg.G(elements=run_rects),
        ],
    )
    return XML_HEADER + document.as_str()


def format_size(svg_content: str) -> str:
    """Human readable size of the encoded document (UTF-8 bytes)."""
    size = len(svg_content.encode("utf-8"))

    if size < 1024:
        return f"{size} B"
    elif size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    else:
        return f"{size / (1024 * 1024):.1f} MB"
