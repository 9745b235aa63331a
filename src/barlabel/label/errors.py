class LabelError(Exception):
    """Input of the label generator can't be used"""


class LayoutError(LabelError):
    """Layout file is missing, unreadable or malformed"""


class CsvError(LabelError):
    """CSV data file is missing, unreadable or empty"""
