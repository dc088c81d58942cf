"""
Command-line interface for pageframe.

Usage:
    pageframe capture request.json --output framed.pdf
    pageframe capture --url https://example.com --selector main
    pageframe version
"""

import argparse
import logging
import sys
from pathlib import Path

from .exceptions import PageframeError

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="pageframe",
        description="pageframe - capture web page elements into framed PDF pages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pageframe capture request.json -o framed.pdf
  pageframe capture --url https://example.com --selector main --remove .cookie-banner
  pageframe capture request.json --storage-dir ./documents
  pageframe version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    capture_parser = subparsers.add_parser("capture", help="Capture URLs into a PDF")
    capture_parser.add_argument("request", nargs="?", help="Request JSON file")
    capture_parser.add_argument("--url", action="append", default=[], help="URL to capture (repeatable)")
    capture_parser.add_argument("--selector", help="CSS selector of the element to capture (default: body)")
    capture_parser.add_argument("--wait", action="append", default=[], help="Selector to wait for (repeatable)")
    capture_parser.add_argument("--remove", action="append", default=[], help="Selector to remove (repeatable)")
    capture_parser.add_argument("--name", help="Document name")
    capture_parser.add_argument("-o", "--output", help="Write the PDF here instead of storing it")
    capture_parser.add_argument(
        "--storage-dir",
        default="pageframe-output",
        help="Local storage directory (default: pageframe-output)",
    )
    capture_parser.add_argument("--headed", action="store_true", help="Show the browser window")
    capture_parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    capture_parser.add_argument("--plain-log", action="store_true", help="Disable rich log output")

    subparsers.add_parser("version", help="Show version information")

    return parser


def request_from_args(args):
    """Build a CaptureRequest from a request file or from --url options."""
    from dataclasses import replace

    from .models.request import CaptureRequest

    if args.request and args.url:
        raise PageframeError("Pass either a request file or --url, not both")
    if args.request:
        request = CaptureRequest.from_json_file(args.request)
        if args.name:
            request = replace(request, name=args.name)
        return request
    if not args.url:
        raise PageframeError("Nothing to capture: pass a request file or --url")

    selectors = {}
    if args.selector:
        selectors["main"] = args.selector
    if args.wait:
        selectors["wait"] = args.wait
    if args.remove:
        selectors["remove"] = args.remove
    return CaptureRequest.from_dict({
        "name": args.name,
        "selectors": selectors or None,
        "items": [{"url": url} for url in args.url],
    })


def cmd_capture(args):
    """Handle capture command."""
    from dataclasses import replace

    from .api import capture_request, render_request
    from .capture.browser import PlaywrightBrowser
    from .capture.storage import LocalStorage
    from .config import CaptureSettings, ComposerOptions
    from .utils.logger import configure_logging

    configure_logging(args.log_level, rich=not args.plain_log)

    try:
        request = request_from_args(args)
        settings = CaptureSettings.from_env()
        if args.headed:
            settings = replace(settings, headless=False)
        options = ComposerOptions.from_env()
        browser = PlaywrightBrowser(settings)

        if args.output:
            pdf_bytes = capture_request(request, browser, settings=settings, options=options)
            output_path = Path(args.output)
            output_path.write_bytes(pdf_bytes)
            print(f"Saved: {output_path}")
        else:
            url = render_request(request, browser, LocalStorage(args.storage_dir), settings=settings, options=options)
            print(url)
    except PageframeError as exc:
        logger.debug("Capture failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def cmd_version(args=None):
    """Show version information."""
    from .version import __version__

    print(f"pageframe v{__version__}")
    return 0


def main(argv=None):
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command == "capture":
        return cmd_capture(args)
    elif args.command == "version":
        return cmd_version(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
