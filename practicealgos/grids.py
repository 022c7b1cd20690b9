"""Grid exercises: flood fill, rotation and the compact sparse form."""


def _rows(matrix):
    """Copy ``matrix`` into a list of lists, rejecting ragged rows."""
    rows = [list(row) for row in matrix]
    if len({len(row) for row in rows}) > 1:
        raise ValueError("matrix rows must have equal length")
    return rows


def flood_fill(matrix, x, y, target):
    """Return a copy of ``matrix`` with the region around (x, y) set to ``target``.

    The region is every cell reachable from (x, y) through horizontal and
    vertical steps over cells holding the same value as (x, y).
    """
    grid = _rows(matrix)
    if not (0 <= x < len(grid) and 0 <= y < len(grid[x])):
        raise IndexError("start cell lies outside the matrix")
    original = grid[x][y]
    if original == target:
        return grid
    pending = [(x, y)]
    while pending:
        i, j = pending.pop()
        if 0 <= i < len(grid) and 0 <= j < len(grid[i]) and grid[i][j] == original:
            grid[i][j] = target
            pending.extend(((i + 1, j), (i, j + 1), (i - 1, j), (i, j - 1)))
    return grid


def rotate_matrix(matrix):
    """Return ``matrix`` turned a quarter turn clockwise."""
    rows = _rows(matrix)
    return [list(column) for column in zip(*reversed(rows))]


def to_sparse(matrix):
    """Return the compact form of ``matrix``.

    The first triple is (rows, columns, non-zero count); each following triple
    is (row, column, value) for a non-zero cell, with 1-based indices, in
    row-major order.
    """
    rows = _rows(matrix)
    width = len(rows[0]) if rows else 0
    entries = [
        (i, j, value)
        for i, row in enumerate(rows, start=1)
        for j, value in enumerate(row, start=1)
        if value != 0
    ]
    return [(len(rows), width, len(entries)), *entries]


def _parse_sparse(sparse):
    triples = [tuple(triple) for triple in sparse]
    if not triples:
        raise ValueError("compact form needs a header triple")
    if any(len(triple) != 3 for triple in triples):
        raise ValueError("compact form must consist of triples")
    (rows, cols, count), *entries = triples
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    if count != len(entries):
        raise ValueError(
            f"header announces {count} entries but {len(entries)} follow"
        )
    for row, col, _ in entries:
        if not (1 <= row <= rows and 1 <= col <= cols):
            raise ValueError(f"entry ({row}, {col}) lies outside the matrix")
    return rows, cols, entries


def sparse_transpose(sparse):
    """Return the compact form of the transpose of a compact-form matrix."""
    rows, cols, entries = _parse_sparse(sparse)
    swapped = sorted((col, row, value) for row, col, value in entries)
    return [(cols, rows, len(swapped)), *swapped]


def from_sparse(sparse):
    """Expand a compact-form matrix into a full list of rows."""
    rows, cols, entries = _parse_sparse(sparse)
    dense = [[0] * cols for _ in range(rows)]
    for row, col, value in entries:
        dense[row - 1][col - 1] = value
    return dense