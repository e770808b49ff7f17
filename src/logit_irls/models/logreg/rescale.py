"""Affine map between arbitrary target ranges and [0, 1]."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ...common.errors import DegenerateTargetsError


@dataclass(frozen=True)
class TargetRescaler:
    """``original = probability * scale + shift``.

    ``shift=0, scale=1`` is the identity and marks a model trained for
    classification.
    """

    shift: float = 0.0
    scale: float = 1.0

    @classmethod
    def fit(cls, targets: np.ndarray) -> TargetRescaler:
        """Take shift and scale from the min and max of ``targets``.

        Raises:
            DegenerateTargetsError: If there are no targets or they are all equal.
        """
        values = np.asarray(targets, dtype=float)
        if values.size == 0:
            raise DegenerateTargetsError('Cannot fit targets: dataset is empty')
        lo = float(np.min(values))
        hi = float(np.max(values))
        if not (np.isfinite(lo) and np.isfinite(hi)):
            raise DegenerateTargetsError('Cannot fit targets: values must be finite')
        if hi == lo:
            raise DegenerateTargetsError(
                f'Cannot fit targets: all values equal {lo}, range is zero'
            )
        return cls(shift=lo, scale=hi - lo)

    @property
    def is_identity(self) -> bool:
        return self.shift == 0 and self.scale == 1

    def normalize(self, targets: np.ndarray) -> np.ndarray:
        """Map targets in place onto [0, 1] and return the same array."""
        targets -= self.shift
        targets /= self.scale
        return targets

    def denormalize(self, probability: float | np.ndarray) -> float | np.ndarray:
        return probability * self.scale + self.shift
