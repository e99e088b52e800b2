def marks(lines):
    """(row, col) of every marked two-character cell."""
    return {(r, i // 2)
            for r, line in enumerate(lines)
            for i in range(0, len(line), 2)
            if line[i] == '*'}


def mirror(line):
    """Reverse a rendered line cell by cell."""
    cells = [line[i:i + 2] for i in range(0, len(line), 2)]
    return ''.join(reversed(cells))
