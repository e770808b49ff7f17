"""Model implementations for logit_irls.

This package contains per-model implementations:
- logreg: logistic regression fit by IRLS
"""

from . import logreg

__all__ = [
    'logreg',
]
