"""Minimal delimited-text reader for the scoring standards table."""

from pathlib import Path

from acft.errors import ColumnIndexOutOfBoundsError, SourceUnavailableError

DELIMITER = ","


class CSVReader:
    """
    Reads rows and columns from delimited text. Cells are split on a single
    delimiter character; quoting and escaped delimiters are not supported.
    """

    def __init__(self, contents: str, delimiter: str = DELIMITER):
        self.contents = contents
        self.delimiter = delimiter

    @classmethod
    def from_path(cls, path: str | Path, delimiter: str = DELIMITER) -> "CSVReader":
        """Read a file. Raises SourceUnavailableError if it is missing or unreadable."""
        path = Path(path)
        if not path.is_file():
            raise SourceUnavailableError(path)
        try:
            contents = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableError(path, str(e)) from e
        return cls(contents, delimiter)

    def read_rows(self, remove_headers: bool = True) -> list[list[str]]:
        """
        Split into rows of cells. Trailing blank lines are ignored.

        "a,b\\nc,d" with remove_headers=False -> [["a", "b"], ["c", "d"]]
        """
        lines = self.contents.splitlines()
        while lines and not lines[-1].strip():
            lines.pop()
        if remove_headers and lines:
            lines = lines[1:]
        return [line.split(self.delimiter) for line in lines]

    def read_column(self, index: int, remove_header: bool = True) -> list[str]:
        """One stripped cell per row. Raises ColumnIndexOutOfBoundsError on a short row."""
        column = []
        first_row = 2 if remove_header else 1
        for row_number, row in enumerate(self.read_rows(remove_header), start=first_row):
            if not 0 <= index < len(row):
                raise ColumnIndexOutOfBoundsError(index, row_number)
            column.append(row[index].strip())
        return column
