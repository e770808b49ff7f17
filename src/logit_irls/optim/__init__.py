"""Optimizers and the execution contexts they run in."""

from .execution import execution_context, logical_cores
from .irls import IRLSRun, IterativelyReweightedLeastSquares, Optimizer

__all__ = [
    'IRLSRun',
    'IterativelyReweightedLeastSquares',
    'Optimizer',
    'execution_context',
    'logical_cores',
]
