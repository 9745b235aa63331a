from .code128 import Code128
from .ean import Ean13, UpcA
