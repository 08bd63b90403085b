"""Color derivation helpers shared by the chart style builders."""

from __future__ import annotations

import numpy as np
from matplotlib.colors import is_color_like, to_hex, to_rgba

__all__ = ["blend_toward_white", "validate_color"]


def validate_color(value: str) -> str:
    """Return ``value`` unchanged if matplotlib understands it as a color."""

    if not isinstance(value, str) or not is_color_like(value):
        raise ValueError(f"Not a valid color: {value!r}")
    return value


def blend_toward_white(color: str, ratio: float) -> str:
    """Blend ``color`` toward white by ``ratio`` (0 keeps it, 1 gives white).

    The result is a lowercase hex string; alpha is preserved when the input
    carries one.
    """

    if not 0.0 <= ratio <= 1.0:
        raise ValueError(f"Blend ratio must be within [0, 1], got {ratio}")
    rgba = np.asarray(to_rgba(color), dtype=float)
    rgb = rgba[:3] + (1.0 - rgba[:3]) * ratio
    rgb = np.clip(rgb, 0.0, 1.0)
    if rgba[3] < 1.0:
        return to_hex((*rgb, rgba[3]), keep_alpha=True)
    return to_hex(rgb)
