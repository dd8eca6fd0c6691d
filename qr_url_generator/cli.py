"""CLI entry point for QR URL Generator."""

import re
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from qr_url_generator import MAX_PIXEL_SIZE, MIN_PIXEL_SIZE, __version__
from qr_url_generator.image_utils import ensure_image_extension
from qr_url_generator.qr_generator import GeneratorConfig, render_qr_code
from qr_url_generator.report import Level, report


USAGE = """\
Usage:
  qrcode [-h|--help] [-u|--url URL] [-s|--size N] [-o|--output FILE]

Options:
  -h, --help         Display this help text
  -u, --url URL      Set URL for QR code (required)
  -s, --size SIZE    Set pixel size per module, 10-100 (default: 20)
  -o, --output FILE  Set output filename, .png or .jpg (default: qrcode.png)

Examples:
  qrcode --url "https://example.com"
  qrcode -u "https://example.com" -s 10 -o codes/example.png"""

# Exit codes
EXIT_OK = 0
EXIT_RENDER_ERROR = 1
EXIT_USAGE = 2

Reporter = Callable[[Level, str], None]

# Optional sign plus ASCII digits, surrounding whitespace allowed
_INTEGER = re.compile(r"\s*[+-]?[0-9]+\s*", re.ASCII)


@dataclass
class ParseResult:
    """Outcome of :func:`parse_arguments`."""

    config: GeneratorConfig | None = None
    help_shown: bool = False

    @property
    def ok(self) -> bool:
        return self.config is not None


def print_header(out: Reporter = report) -> None:
    out(Level.INFO, f"QR Code Generator v{__version__}")
    out(Level.INFO, "=" * 50)


def print_help(out: Reporter = report) -> None:
    out(Level.INFO, USAGE)


def clamp_pixel_size(size: int) -> int:
    return max(MIN_PIXEL_SIZE, min(size, MAX_PIXEL_SIZE))


def parse_arguments(argv: Sequence[str], out: Reporter = report) -> ParseResult:
    """Parse command-line tokens into a :class:`GeneratorConfig`.

    Flags are matched case-insensitively and the token after a value flag is
    always taken as its value, even if it looks like a flag. Unrecognized
    tokens are ignored. ``--help`` stops parsing wherever it appears.

    Every failure is reported through *out* and yields a result whose
    ``ok`` is False.
    """
    if not argv:
        print_help(out)
        return ParseResult(help_shown=True)

    config = GeneratorConfig()
    tokens = list(argv)
    i = 0
    while i < len(tokens):
        flag = tokens[i].lower()
        has_value = i + 1 < len(tokens)

        if flag in ("-h", "--help"):
            print_help(out)
            return ParseResult(help_shown=True)

        elif flag in ("-u", "--url"):
            if not has_value:
                out(Level.ERROR, "URL parameter is missing")
                return ParseResult()
            i += 1
            config.url = tokens[i]
            out(Level.INFO, f"URL set to: {config.url}")

        elif flag in ("-s", "--size"):
            if not has_value:
                out(Level.ERROR, "Invalid size parameter")
                return ParseResult()
            i += 1
            if not _INTEGER.fullmatch(tokens[i]):
                out(Level.ERROR, "Invalid size parameter")
                return ParseResult()
            size = int(tokens[i])
            config.pixel_size = clamp_pixel_size(size)
            out(Level.INFO, f"Pixel size set to: {config.pixel_size}")

        elif flag in ("-o", "--output"):
            if not has_value:
                out(Level.ERROR, "Output filename is missing")
                return ParseResult()
            i += 1
            original_name = tokens[i]
            config.output_file = ensure_image_extension(original_name)
            if config.output_file != original_name:
                out(
                    Level.WARNING,
                    f"Changed output filename to {config.output_file} "
                    f"to ensure valid image format",
                )
            else:
                out(Level.INFO, f"Output file set to: {config.output_file}")

        # Anything else is ignored
        i += 1

    if not config.url.strip():
        out(Level.ERROR, "URL is required")
        return ParseResult()

    return ParseResult(config=config)


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    print_header()

    result = parse_arguments(argv)
    if not result.ok:
        # An explicit --help is not a failure; a bare invocation is
        return EXIT_OK if result.help_shown and argv else EXIT_USAGE

    config = result.config
    report(Level.INFO, "Generating QR code...")
    outcome = render_qr_code(config)
    if not outcome.ok:
        report(Level.ERROR, outcome.error)
        return EXIT_RENDER_ERROR

    report(Level.SUCCESS, f"QR Code successfully saved as {config.output_file}")
    report(Level.INFO, f"Saved to {outcome.output_path}")
    report(Level.INFO, f"The QR code contains the URL: {outcome.url}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
