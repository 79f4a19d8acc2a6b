"""Axis-aligned rectangle overlap test for sprites."""


def sprites_collide(x1: int, y1: int, x2: int, y2: int,
                    w1: int, h1: int, w2: int, h2: int) -> bool:
    """True if the rectangles at (x1, y1) and (x2, y2) overlap.

    Sizes are in pixels; rectangles that merely share an edge do not overlap.
    """
    w1 -= 1
    w2 -= 1
    h1 -= 1
    h2 -= 1
    return (x1 + w1 >= x2 and x1 <= x2 + w2
            and y2 + h2 >= y1 and y2 <= y1 + h1)