"""Shared floating-point settings for the numeric routines."""

import numpy as np


def errstate():
    """Let numpy produce ``nan``/``±inf`` for bad arithmetic without warnings.

    Division by zero, invalid operations and overflow follow IEEE semantics
    inside this context, so degenerate inputs give non-finite results
    instead of ``RuntimeWarning`` noise.
    """
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")
