import argparse
import logging
import sys

from . import __version__
from .barcode import BarcodeType, draw, validate
from .image.pdf import PdfCanvas
from .image.svg import SvgCanvas
from .label import CsvData, LabelError, LabelGenerator, Layout, check_layout


logger = logging.getLogger(__name__)

VERSION_TEXT = "barlabel - batch label generator, version {}".format(
    __version__
)


def positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("{} is not positive".format(value))
    return number


parser = argparse.ArgumentParser(
    prog="barlabel",
    description="Generate a PDF with one label per CSV row",
)
parser.add_argument(
    "csv_file",
    nargs="?",
    help="Path to CSV data file."
)
parser.add_argument(
    "-c", "--config",
    default="config.json",
    help="JSON layout file (default: %(default)s)."
)
parser.add_argument(
    "-o", "--output",
    default="labels.pdf",
    help="Output PDF filename (default: %(default)s)."
)
parser.add_argument(
    "-r", "--row",
    type=int,
    default=None,
    help="Process specific row only (default: all rows)."
)
parser.add_argument(
    "--validate",
    action="store_true",
    help="Validate configuration without generating PDF."
)
parser.add_argument(
    "-v", "--version",
    action="version",
    version=VERSION_TEXT
)
parser.add_argument(
    "-q", "--quiet",
    action="store_true",
    help="Only report warnings and errors."
)


barcode_parser = argparse.ArgumentParser(
    prog="barlabel-barcode",
    description="Generate a single barcode as svg or pdf",
)
barcode_parser.add_argument(
    "--file-type",
    type=str,
    default="svg",
    choices=["svg", "pdf"],
    help="Generated file type."
)
barcode_parser.add_argument(
    "--barcode-type",
    type=str,
    default="code128",
    choices=[barcode_type.value for barcode_type in BarcodeType],
    help="Type of barcode used."
)
barcode_parser.add_argument(
    "--width",
    type=positive_float,
    default=300.0,
    help="Barcode width in points."
)
barcode_parser.add_argument(
    "--height",
    type=positive_float,
    default=80.0,
    help="Barcode height in points."
)
barcode_parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)
barcode_parser.add_argument(
    "out",
    type=str,
    help="Output path."
)


def setup_logging(quiet=False):
    logging.basicConfig(
        level=logging.WARNING if quiet else logging.INFO,
        format="%(levelname)s: %(message)s"
    )


def generate(args):
    data = CsvData.load(args.csv_file)
    logger.info("Loaded CSV '%s' with %d fields and %d rows",
                args.csv_file, data.field_count, data.row_count)
    if data.row_count == 0:
        raise LabelError("CSV file {} has no data rows".format(args.csv_file))
    logger.info("Using config: %s", args.config)
    logger.info("Output file: %s", args.output)
    layout = Layout.load(args.config)
    layout.register_fonts()

    canvas = PdfCanvas(args.output, pagesize=layout.page.pagesize)
    pages = LabelGenerator(layout, data).generate(canvas, row=args.row)
    try:
        canvas.save()
    except OSError as e:
        raise LabelError(
            "Error saving PDF to {}: {}".format(args.output, e)
        ) from e
    logger.info("Successfully generated: %s with %d labels",
                args.output, pages)


def main(cmd_args=None):
    args = parser.parse_args(cmd_args)
    setup_logging(args.quiet)
    if args.validate:
        return check_layout(args.config)
    if args.csv_file is None:
        parser.print_usage(sys.stderr)
        logger.error("CSV file is required")
        return 1
    try:
        generate(args)
    except LabelError as e:
        logger.error("%s", e)
        return 1
    return 0


def barcode_main(cmd_args=None):
    args = barcode_parser.parse_args(cmd_args)
    setup_logging()
    barcode_type = BarcodeType(args.barcode_type)
    if not validate(barcode_type, args.content):
        logger.error("Invalid %s content: %r", args.barcode_type, args.content)
        return 1
    if args.file_type == "svg":
        canvas = SvgCanvas(args.width, args.height)
        draw(canvas, 0, 0, args.width, args.height, barcode_type, args.content)
        with open(args.out, canvas.file_open_mode) as image_file:
            canvas.write(image_file)
    else:
        canvas = PdfCanvas(args.out, pagesize=(args.width, args.height))
        draw(canvas, 0, 0, args.width, args.height, barcode_type, args.content)
        canvas.end_page()
        canvas.save()
    logger.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
