"""
5x6 bitmap font for on-screen labels.

Each glyph is six rows of five characters; ``#`` marks a lit pixel.
Row 0 is the top of the character cell.
"""

GLYPH_WIDTH = 5
GLYPH_HEIGHT = 6
GLYPH_SPACING = 1

GLYPHS = {
    '0': [
        " ### ",
        "#   #",
        "#   #",
        "#   #",
        "#   #",
        " ### ",
    ],
    '1': [
        "  #  ",
        " ##  ",
        "  #  ",
        "  #  ",
        "  #  ",
        " ### ",
    ],
    '2': [
        " ### ",
        "#   #",
        "   # ",
        "  #  ",
        " #   ",
        "#####",
    ],
    '3': [
        " ### ",
        "#   #",
        "  ## ",
        "    #",
        "#   #",
        " ### ",
    ],
    '4': [
        "   # ",
        "  ## ",
        " # # ",
        "#  # ",
        "#####",
        "   # ",
    ],
    '5': [
        "#####",
        "#    ",
        "#### ",
        "    #",
        "#   #",
        " ### ",
    ],
    '6': [
        " ### ",
        "#    ",
        "#### ",
        "#   #",
        "#   #",
        " ### ",
    ],
    '7': [
        "#####",
        "    #",
        "   # ",
        "  #  ",
        " #   ",
        "#    ",
    ],
    '8': [
        " ### ",
        "#   #",
        " ### ",
        "#   #",
        "#   #",
        " ### ",
    ],
    '9': [
        " ### ",
        "#   #",
        "#   #",
        " ####",
        "    #",
        " ### ",
    ],
    '.': [
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
        "  #  ",
    ],
    '-': [
        "     ",
        "     ",
        "#####",
        "     ",
        "     ",
        "     ",
    ],
    ',': [
        "     ",
        "     ",
        "     ",
        "     ",
        "  #  ",
        " #   ",
    ],
    '(': [
        "  #  ",
        " #   ",
        "#    ",
        "#    ",
        " #   ",
        "  #  ",
    ],
    ')': [
        "  #  ",
        "   # ",
        "    #",
        "    #",
        "   # ",
        "  #  ",
    ],
    ' ': [
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
        "     ",
    ],
    'X': [
        "#   #",
        " # # ",
        "  #  ",
        " # # ",
        "#   #",
        "     ",
    ],
    'Y': [
        "#   #",
        " # # ",
        "  #  ",
        "  #  ",
        "  #  ",
        "     ",
    ],
    'Z': [
        "#####",
        "   # ",
        "  #  ",
        " #   ",
        "#####",
        "     ",
    ],
}

# Shown for any character missing from GLYPHS
FALLBACK_GLYPH = [
    "#####",
    "#   #",
    "#   #",
    "#   #",
    "#   #",
    "#####",
]


def glyph_for(char: str) -> list:
    """Return the bitmap rows for ``char``, falling back to a box."""
    return GLYPHS.get(char, FALLBACK_GLYPH)


def text_width(text: str) -> int:
    """Pixel advance of ``text`` including inter-character spacing."""
    return len(text) * (GLYPH_WIDTH + GLYPH_SPACING)
