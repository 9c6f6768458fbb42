"""Box-drawing glyphs and the region label sentinels shared by all transforms."""

BLANK = " "
HORIZONTAL = "-"
VERTICAL = "|"
CORNER = "+"

BORDER_GLYPHS = frozenset({HORIZONTAL, VERTICAL, CORNER})

# Two adjacent border glyphs with no gap between them. Checked in this order;
# the leftmost occurrence of the first pattern that matches at all wins.
AMBIGUOUS_PAIRS = ("++", "||", "+|")

# Label for cells that are not blank.
UNLABELED = 0

# Label for every cell of a blank region that touches the outer boundary.
DISCARD = -1
