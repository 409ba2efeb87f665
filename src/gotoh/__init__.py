"""
Affine-gap global alignment cost (Gotoh's algorithm) in quadratic and linear space.
"""
from gotoh.core.alphabet import Alphabet, AlphabetError, AlphabetOutOfRange
from gotoh.engines.scoring import ScoringModel, DEFAULT_MODEL
from gotoh.engines.pairwise import (
    AlignmentMatrices, QuadraticAligner, LinearAligner, align, align_linear_space, align_many,
    AlignmentError, AllocationError, GotohWarning, MatrixSizeWarning
)
from gotoh.utils import AlignConfig
from gotoh.utils.resources import RESOURCES

__all__ = [
    'Alphabet', 'AlphabetError', 'AlphabetOutOfRange', 'ScoringModel', 'DEFAULT_MODEL', 'AlignmentMatrices',
    'QuadraticAligner', 'LinearAligner', 'align', 'align_linear_space', 'align_many', 'AlignmentError',
    'AllocationError', 'GotohWarning', 'MatrixSizeWarning', 'AlignConfig', 'RESOURCES'
]
