from .config import Layout, check_layout
from .errors import CsvError, LabelError, LayoutError
from .generator import LabelGenerator
from .table import CsvData
