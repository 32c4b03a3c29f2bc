"""Immutable run configuration, built once from the command line."""

import argparse
from dataclasses import dataclass, field
from typing import Optional

from .layout import Alignment
from .style import StyleSpec, parse_rgb


@dataclass(frozen=True)
class ClockConfig:
    message: str = ""
    font: Optional[str] = None
    style: StyleSpec = field(default_factory=StyleSpec)
    alignment: Alignment = Alignment.TOP
    random_font: bool = False
    renderer: str = "auto"
    log_file: Optional[str] = None
    log_level: str = "INFO"


def config_from_args(args: argparse.Namespace) -> ClockConfig:
    """Validate parsed arguments. Raises InvalidColorFormat for bad colors."""
    style = StyleSpec(
        foreground=parse_rgb(args.foreground) if args.foreground else None,
        background=parse_rgb(args.background) if args.background else None,
    )
    return ClockConfig(
        message=args.message,
        font=args.font,
        style=style,
        alignment=Alignment.parse(args.align),
        random_font=args.random,
        renderer=args.renderer,
        log_file=args.log_file,
        log_level=args.log_level,
    )
