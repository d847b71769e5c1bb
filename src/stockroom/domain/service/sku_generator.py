"""Domain service: SKU generation.

A SKU reads as ``DDDD-SSS-CCC-RRR``: design, size and color prefixes
followed by a random base-36 suffix. Uniqueness against existing SKUs is
not checked; with 36**3 suffixes per prefix a collision is unlikely.
"""

from __future__ import annotations

import random
import re
import string

SKU_PATTERN = re.compile(r"^[A-Z0-9]{4}-[A-Z0-9]{3}-[A-Z0-9]{3}-[A-Z0-9]{3}$")

FILLER = "X"
SUFFIX_ALPHABET = string.digits + string.ascii_uppercase
SUFFIX_LENGTH = 3

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def _segment(text: str, width: int) -> str:
    # upper() can lengthen text ("ß" -> "SS"), so truncate again afterwards
    code = _NON_ALNUM.sub(FILLER, text.strip()[:width].upper()[:width])
    return code.ljust(width, FILLER)


def generate_sku(
    design: str,
    size: str,
    color: str,
    rng: random.Random | None = None,
) -> str:
    """Build a SKU from the product's natural key plus a random suffix."""
    rng = rng or random.Random()
    suffix = "".join(rng.choice(SUFFIX_ALPHABET) for _ in range(SUFFIX_LENGTH))
    return "-".join((_segment(design, 4), _segment(size, 3), _segment(color, 3), suffix))
