"""
figclock - big ASCII-art message plus a running clock, full screen.

Usage: figclock -m "Hello" [-f FONT | -r] [-F r,g,b] [-B r,g,b] [-a top|center|bottom]

Controls:
- Esc: Quit
- Up/Down: Next/previous font
"""

import argparse
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from . import __version__
from .app import run
from .config import config_from_args
from .errors import FigClockError
from .fonts import FONTS
from .glyphs import BACKENDS
from .log import configure_logging, get_logger

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="figclock",
        description="Full-screen ASCII-art message and elapsed-time clock",
    )
    parser.add_argument("-m", "--msg", dest="message", default="", help="Message to display")
    parser.add_argument("-f", "--font", help="Font name (see --list-fonts)")
    parser.add_argument("-F", "--fg", dest="foreground", metavar="R,G,B", help="Foreground color, e.g. 255,255,255")
    parser.add_argument("-B", "--bg", dest="background", metavar="R,G,B", help="Background color, e.g. 0,0,0")
    parser.add_argument("-r", "--rand", dest="random", action="store_true",
                        help="Pick a random font at startup (overrides -f)")
    parser.add_argument("-a", "--align", choices=["top", "center", "bottom"], default="top",
                        help="Vertical position of the message (default: top)")
    parser.add_argument("--renderer", choices=BACKENDS, default="auto",
                        help="Glyph backend; auto uses figlet when installed (default: auto)")
    parser.add_argument("--list-fonts", action="store_true", help="List font names and exit")
    parser.add_argument("--log-file", help="Write a log to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level (default: INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console(stderr=True)

    if args.list_fonts:
        print("\n".join(FONTS))
        return 0

    try:
        config = config_from_args(args)
        configure_logging(config.log_file, config.log_level)
    except (FigClockError, OSError) as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    try:
        run(config)
    except FigClockError as e:
        logger.error("fatal: %s", e, exc_info=True)
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1
    return 0

