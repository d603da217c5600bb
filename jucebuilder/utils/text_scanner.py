"""Line-oriented helpers for scanning CMake scripts.

Nesting is tracked by counting parentheses per line. Parentheses inside
string literals or comments are counted too, so a line holding an
unbalanced parenthesis in a quoted argument will throw the depth off.
"""


def paren_delta(line):
    """Return opening minus closing parentheses on a single line."""
    return line.count("(") - line.count(")")


def leading_whitespace(line):
    """Return the whitespace prefix of a line, without its line ending."""
    stripped = line.rstrip("\r\n")
    return stripped[:len(stripped) - len(stripped.lstrip())]


def leading_whitespace_width(line):
    return len(leading_whitespace(line))


def find_first_matching_marker(lines, predicate, start=0):
    """Return the index of the first line at or after ``start`` matching ``predicate``."""
    for index in range(start, len(lines)):
        if predicate(lines[index]):
            return index
    return None


def block_end(lines, start):
    """Return the index where the parenthesized block opened at ``start`` closes.

    Depth is accumulated from the opening line itself; the block ends on the
    first line where it drops to zero or below. Returns ``None`` when the
    document ends while the block is still open.
    """
    depth = 0
    for index in range(start, len(lines)):
        depth += paren_delta(lines[index])
        if depth <= 0:
            return index
    return None
