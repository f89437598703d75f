"""Command-line interface for PDF Splitter."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pdf_splitter import __version__
from pdf_splitter.core.archive import build_archive
from pdf_splitter.core.config import SplitterConfig
from pdf_splitter.core.errors import SplitError
from pdf_splitter.core.splitter import PDFSplitter


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pdf-splitter",
        description="Split a PDF into one document per page or page range.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pdf-splitter report.pdf "1-3, 5-7, 10"
  pdf-splitter report.pdf "1,3,5" -o pages.zip
  pdf-splitter report.pdf "2-4, 9" --no-zip -d out/

Instruction Formats:
  5         Page 5 as its own document
  1-10      Pages 1 through 10 as one document
  1,5,9     Three single-page documents
  1-3,7-10  Two documents: pages 1-3 and pages 7-10
        """,
    )

    parser.add_argument(
        "pdf_path",
        type=str,
        help="Path to the PDF file to split",
    )

    parser.add_argument(
        "instructions",
        type=str,
        help='Comma-separated pages and ranges, e.g. "1-3, 5"',
    )

    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        help="Output zip path (default: <input>-split.zip next to the input)",
    )

    parser.add_argument(
        "--no-zip",
        action="store_true",
        help="Write the individual PDFs instead of a zip archive",
    )

    parser.add_argument(
        "-d",
        "--output-dir",
        type=str,
        default=None,
        help="Directory for --no-zip output (default: input's directory)",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log progress details",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pdf_path = Path(args.pdf_path).resolve()

    if not pdf_path.exists():
        print(f"Error: File not found: {pdf_path}", file=sys.stderr)
        return 1

    if not pdf_path.suffix.lower() == ".pdf":
        print(f"Warning: File doesn't have .pdf extension: {pdf_path}")

    try:
        config = SplitterConfig.from_environment()
        splitter = PDFSplitter(config)
        outputs = splitter.split_from_instructions(
            pdf_path.read_bytes(), args.instructions, pdf_path.name
        )

        if args.no_zip:
            output_dir = Path(args.output_dir) if args.output_dir else pdf_path.parent
            output_dir.mkdir(parents=True, exist_ok=True)
            for output in outputs:
                target = output_dir / output.filename
                target.write_bytes(output.data)
                print(f"  {target} (pages {_describe(output.pages)})")
            print(f"\nWrote {len(outputs)} PDFs to: {output_dir}")
            return 0

        archive = build_archive(outputs, pdf_path.name, config)
        output_path = (
            Path(args.output) if args.output else pdf_path.parent / archive.filename
        )
        output_path.write_bytes(archive.to_bytes())

        for output in outputs:
            print(f"  {output.filename} (pages {_describe(output.pages)})")
        print(f"\nSplit PDF saved to: {output_path}")
        return 0

    except SplitError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130


def _describe(pages: list[int]) -> str:
    if len(pages) == 1:
        return str(pages[0])
    return f"{pages[0]}-{pages[-1]}"


if __name__ == "__main__":
    sys.exit(main())
