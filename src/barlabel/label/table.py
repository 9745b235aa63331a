import csv
import logging

from .errors import CsvError


logger = logging.getLogger(__name__)

MAX_FIELDS = 256
MAX_ROWS = 100000


def _clean(values):
    return [value.rstrip() for value in values]


def _is_blank(values):
    return all(not value.strip() for value in values)


class CsvData:
    """Rows of a CSV file, addressed by header column name"""

    def __init__(self, field_names, rows):
        self.field_names = list(field_names)
        self.rows = [list(row) for row in rows]
        self._columns = {}
        for i, name in enumerate(self.field_names):
            # first column wins for duplicated names
            self._columns.setdefault(name, i)

    @property
    def row_count(self):
        return len(self.rows)

    @property
    def field_count(self):
        return len(self.field_names)

    def value(self, row_index, name):
        """Value of column name in given row, None if there is none"""
        column = self._columns.get(name)
        if column is None or not 0 <= row_index < len(self.rows):
            return None
        return self.rows[row_index][column]

    @classmethod
    def parse(cls, lines):
        """Build CsvData from an iterable of text lines. First line is
the header, lines holding nothing but whitespace and commas are skipped.
Short rows are padded with empty strings, long rows are cut."""
        reader = csv.reader(lines, skipinitialspace=True)
        header = None
        for values in reader:
            if values:
                header = _clean(values)
                break
        if header is None:
            raise CsvError("CSV file is empty")
        if len(header) > MAX_FIELDS:
            logger.warning(
                "Too many CSV columns (%d), keeping first %d",
                len(header), MAX_FIELDS
            )
            header = header[:MAX_FIELDS]
        width = len(header)
        rows = []
        for values in reader:
            if _is_blank(values):
                continue
            if len(rows) >= MAX_ROWS:
                logger.warning("CSV row limit %d reached, ignoring the rest",
                               MAX_ROWS)
                break
            row = _clean(values[:width])
            row.extend("" for _ in range(width - len(row)))
            rows.append(row)
        return cls(header, rows)

    @classmethod
    def load(cls, path):
        try:
            with open(path, newline="", encoding="utf-8") as csv_file:
                return cls.parse(csv_file)
        except OSError as e:
            raise CsvError(
                "Cannot open CSV file {}: {}".format(path, e.strerror)
            ) from e
        except (csv.Error, UnicodeDecodeError) as e:
            raise CsvError("Cannot parse CSV file {}: {}".format(path, e)) \
                from e
