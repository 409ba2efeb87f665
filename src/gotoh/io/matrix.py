"""
Text rendering of dynamic programming matrices and rolling buffers.
"""
from typing import Iterable

import numpy as np

from gotoh.engines.pairwise import AlignmentMatrices


# Constants ------------------------------------------------------------------------------------------------------------
UNDEF = 'undef'


# Functions ------------------------------------------------------------------------------------------------------------
def format_value(value: float) -> str:
    """Formats one cell with two decimals; undefined (NaN) cells render as ``undef``."""
    return UNDEF if np.isnan(value) else f'{value:.2f}'


def _format_row(row: Iterable[float], sep: str = '\t') -> str:
    return sep.join(map(format_value, row))


def format_matrix(matrix: np.ndarray) -> str:
    """
    Renders a 2-D matrix row-major: cells tab-separated, one newline-terminated line per row.

    Args:
        matrix: The matrix to render.

    Returns:
        The rendered text.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2: raise ValueError(f'Expected a 2-D matrix, got shape {matrix.shape}')
    return ''.join(f'{_format_row(row)}\n' for row in matrix)


def format_matrices(result: AlignmentMatrices) -> str:
    """Renders the ``C``, ``D`` and ``I`` matrices of a quadratic alignment under ``Array`` headers."""
    return '\n'.join(f'Array {name}\n{format_matrix(m)}' for name, m in result.matrices.items())


def format_buffers(cc: np.ndarray, dd: np.ndarray) -> str:
    """Renders the final ``CC`` and ``DD`` rows of a linear-space alignment, space-separated."""
    return f'Array CC\n{_format_row(cc, " ")}\nArray DD\n{_format_row(dd, " ")}\n'
