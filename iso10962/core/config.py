"""Code layout constants and decoder configuration.

No environment or file loading. Pure configuration data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Code layout
# ---------------------------------------------------------------------------

CFI_LENGTH: int = 6

CATEGORY_INDEX: int = 0
GROUP_INDEX: int = 1
ATTRIBUTE_POSITIONS: tuple[int, ...] = (2, 3, 4, 5)

# Legal at every attribute position of every group.
UNDEFINED_CHAR: str = "X"


# ---------------------------------------------------------------------------
# Decoder configuration
# ---------------------------------------------------------------------------


@final
@dataclass(frozen=True, slots=True)
class DecoderConfig:
    """Configuration for Code.parse.

    validate_unstructured: categories without a group schema (spot, forwards,
    strategies, financing, referential, misc) carry bytes 1..5 verbatim. When
    set, those bytes must still be uppercase ASCII letters.

    decode_unlisted_options: category H is carried verbatim by default. When
    set, it is decoded through its group schema (rate, commodity, equity,
    credit, forex, other) like the other structured categories.
    """

    validate_unstructured: bool = False
    decode_unlisted_options: bool = False


DEFAULT_CONFIG: DecoderConfig = DecoderConfig()
STRICT_CONFIG: DecoderConfig = DecoderConfig(validate_unstructured=True)
