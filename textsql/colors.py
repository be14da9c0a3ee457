import numpy as np

PIE_ALPHA = 0.6


class ColorProvider:
    """Random RGBA fills for pie slices.

    Pass a seed to get the same colors on every call sequence.
    """

    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    def rgba(self, count: int, alpha: float = PIE_ALPHA) -> list[str]:
        if count <= 0:
            return []
        channels = self._rng.integers(0, 255, size=(count, 3))
        return [f"rgba({r}, {g}, {b}, {alpha})" for r, g, b in channels.tolist()]
