"""Fonts known to figlet/toilet installs."""

import random
from typing import List, Optional

from .log import get_logger

logger = get_logger("fonts")

FONTS: List[str] = [
    "ascii9", "ascii12", "banner", "big", "bigascii9", "bigascii12",
    "bigmono9", "bigmono12", "block", "bubble", "circle", "digital",
    "emboss", "emboss2", "future", "ivrit", "lean", "letter", "mini",
    "mnemonic", "mono9", "mono12", "pagga", "script", "shadow", "slant",
    "small", "smascii9", "smascii12", "smblock", "smbraille", "smmono9",
    "smmono12", "smscript", "smshadow", "smslant", "standard", "term",
    "wideterm",
]


def font_index(name: Optional[str]) -> int:
    """Index of a font by name; unknown or missing names fall back to the first font."""
    if not name:
        return 0
    try:
        return FONTS.index(name)
    except ValueError:
        logger.warning("unknown font %r, using %r", name, FONTS[0])
        return 0


def random_font_index(rng: Optional[random.Random] = None) -> int:
    """Pick a font uniformly at random."""
    rng = rng or random.Random()
    return rng.randrange(len(FONTS))


def cycle(index: int, step: int) -> int:
    """Move through the font list, wrapping at both ends."""
    return (index + step) % len(FONTS)
