"""Batch label generator with Code128, EAN-13 and UPC-A barcodes"""
from .barcode import BarcodeType, draw, geometry, validate

__version__ = "0.8.0"
