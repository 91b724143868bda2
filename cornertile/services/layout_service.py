from ..config import COLUMN_TABLE, DEFAULT_COLUMNS


class LayoutService:
    """
    Picks how many crops go in each row of the collage.
    """

    def __init__(self, table=None, default: int = DEFAULT_COLUMNS):
        self.table = dict(COLUMN_TABLE if table is None else table)
        self.default = default

    def column_count(self, total: int) -> int:
        """
        Columns per row for `total` images: 4 -> 2, 5 -> 3, 6 -> 3, 7 -> 4, otherwise 6.
        The last row may end up shorter.
        """
        return self.table.get(total, self.default)

    def row_count(self, total: int, columns: int = None) -> int:
        """Rows needed for `total` images, `columns` per row (table value by default)."""
        columns = columns or self.column_count(total)
        return -(-total // columns)
