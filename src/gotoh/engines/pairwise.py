"""Affine-gap global alignment cost (Gotoh) in quadratic and linear space."""
from concurrent.futures import Executor
from dataclasses import dataclass
from typing import Union, Iterable
from warnings import warn

import numpy as np

from gotoh.engines.scoring import ScoringModel, DEFAULT_MODEL
from gotoh.utils.resources import RESOURCES, jit


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class GotohWarning(Warning): pass
class MatrixSizeWarning(GotohWarning):
    """Issued when the quadratic aligner is about to materialize very large matrices."""


class AlignmentError(Exception):
    """Base class for alignment failures."""


class AllocationError(AlignmentError, MemoryError):
    """Raised when the dynamic programming buffers cannot be allocated."""


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class AlignmentMatrices:
    """
    Result of a quadratic-space alignment: the optimal cost and the three score matrices.

    ``C[i, j]`` is the best cost of aligning the first ``i`` symbols of A to the first ``j`` of B,
    ``D[i, j]`` the best cost ending in a gap consuming a symbol of A, and ``I[i, j]`` the best cost
    ending in a gap consuming a symbol of B. Unpacks as ``(cost, {'C': C, 'D': D, 'I': I})``.
    """
    cost: float
    C: np.ndarray
    D: np.ndarray
    I: np.ndarray

    def __iter__(self): return iter((self.cost, self.matrices))

    @property
    def matrices(self) -> dict[str, np.ndarray]: return {'C': self.C, 'D': self.D, 'I': self.I}
    @property
    def shape(self) -> tuple[int, int]: return self.C.shape


class _Aligner:
    """Shared plumbing: holds the scoring model and encodes input sequences."""
    __slots__ = ('_model',)

    def __init__(self, model: ScoringModel = None):
        self._model = DEFAULT_MODEL if model is None else model

    def __repr__(self): return f"{type(self).__name__}({self._model!r})"

    @property
    def model(self) -> ScoringModel: return self._model

    def _encode(self, a, b) -> tuple[np.ndarray, np.ndarray]:
        return self._model.encode(a), self._model.encode(b)

    @staticmethod
    def _allocate(shape, fill_value: float) -> np.ndarray:
        try:
            return np.full(shape, fill_value, dtype=np.float64)
        except (MemoryError, ValueError) as e:
            raise AllocationError(f'Cannot allocate a {shape} alignment buffer') from e


class QuadraticAligner(_Aligner):
    """
    Fills the full (M+1) x (N+1) ``C``, ``D`` and ``I`` matrices of Gotoh's recurrence.

    Examples:
        >>> result = QuadraticAligner().align('AGT', 'AG')
        >>> result.cost
        2.5
    """
    UNDEFINED = np.nan
    __slots__ = ('warn_cells',)

    def __init__(self, model: ScoringModel = None, warn_cells: int = 30_000_000):
        super().__init__(model)
        self.warn_cells = warn_cells

    def allocate(self, m: int, n: int) -> AlignmentMatrices:
        """
        Allocates sentinel-filled matrices for sequences of length ``m`` and ``n``.

        Every cell holds :attr:`UNDEFINED` and the returned cost is undefined too.
        """
        shape = (m + 1, n + 1)
        if self.warn_cells is not None and 3 * shape[0] * shape[1] > self.warn_cells:
            warn(f'Allocating three {shape[0]}x{shape[1]} matrices ({3 * shape[0] * shape[1]} cells); '
                 f'consider LinearAligner if only the cost is needed', MatrixSizeWarning, stacklevel=3)
        return AlignmentMatrices(self.UNDEFINED, *(self._allocate(shape, self.UNDEFINED) for _ in range(3)))

    def align(self, a, b) -> AlignmentMatrices:
        """
        Aligns two sequences and returns the cost together with the filled matrices.

        Args:
            a: First sequence (rows).
            b: Second sequence (columns).

        Returns:
            An :class:`AlignmentMatrices` with read-only matrices.

        Raises:
            AlphabetOutOfRange: If either sequence has a symbol outside the model's alphabet.
            AllocationError: If the matrices cannot be allocated.
        """
        seq1, seq2 = self._encode(a, b)
        empty = self.allocate(len(seq1), len(seq2))
        C, D, I = empty.C, empty.D, empty.I
        cost = _fill_matrices_kernel(seq1, seq2, self._model.table, self._model.gap_open, self._model.gap_extend,
                                     C, D, I)
        for m in (C, D, I): m.flags.writeable = False
        return AlignmentMatrices(float(cost), C, D, I)

    def score(self, a, b) -> float:
        """Returns only the optimal cost."""
        return self.align(a, b).cost


class LinearAligner(_Aligner):
    """
    Computes the optimal cost with two rolling rows, in O(min(M, N)) memory.

    When B is longer than A the inputs are swapped and scored with the transposed table, which
    performs the same floating point operations as the unswapped problem.

    Examples:
        >>> LinearAligner().align('AGT', 'AG')
        2.5
    """
    __slots__ = ()

    def align(self, a, b) -> float:
        """
        Returns the optimal global alignment cost of ``a`` against ``b``.

        Raises:
            AlphabetOutOfRange: If either sequence has a symbol outside the model's alphabet.
            AllocationError: If the row buffers cannot be allocated.
        """
        seq1, seq2 = self._encode(a, b)
        table = self._model.table
        if len(seq2) > len(seq1):
            seq1, seq2 = seq2, seq1
            table = self._model.transposed
        CC = self._allocate(len(seq2) + 1, 0.0)
        DD = self._allocate(len(seq2) + 1, 0.0)
        return float(_linear_score_kernel(seq1, seq2, table, self._model.gap_open, self._model.gap_extend, CC, DD))

    score = align

    def buffers(self, a, b) -> tuple[np.ndarray, np.ndarray]:
        """
        Runs the linear-space pass without swapping and returns the final ``CC`` and ``DD`` rows.

        ``CC[j]`` equals ``C[M, j]`` and ``DD[j]`` equals ``D[M, j]`` of the quadratic form.
        """
        seq1, seq2 = self._encode(a, b)
        CC = self._allocate(len(seq2) + 1, 0.0)
        DD = self._allocate(len(seq2) + 1, 0.0)
        _linear_score_kernel(seq1, seq2, self._model.table, self._model.gap_open, self._model.gap_extend, CC, DD)
        return CC, DD


# Functions ------------------------------------------------------------------------------------------------------------
def align(a, b, model: ScoringModel = None) -> AlignmentMatrices:
    """Quadratic-space alignment; see :meth:`QuadraticAligner.align`."""
    return QuadraticAligner(model).align(a, b)


def align_linear_space(a, b, model: ScoringModel = None) -> float:
    """Linear-space alignment cost; see :meth:`LinearAligner.align`."""
    return LinearAligner(model).align(a, b)


def align_many(pairs: Iterable[tuple], model: ScoringModel = None, linear: bool = True,
               executor: Executor = None) -> list[float]:
    """
    Aligns independent sequence pairs concurrently, sharing one read-only model.

    Args:
        pairs: Iterable of ``(a, b)`` sequence pairs.
        model: Scoring model, the default match/mismatch model if None.
        linear: Use the linear-space aligner (True) or the quadratic one (False).
        executor: Executor to submit work to, the shared ``RESOURCES.pool`` if None.

    Returns:
        The optimal costs in input order.
    """
    aligner: Union[LinearAligner, QuadraticAligner] = (LinearAligner if linear else QuadraticAligner)(model)
    if executor is None: executor = RESOURCES.pool
    futures = [executor.submit(aligner.score, a, b) for a, b in pairs]
    return [f.result() for f in futures]


# Kernels --------------------------------------------------------------------------------------------------------------
@jit(nopython=True, cache=True, nogil=True)
def _fill_matrices_kernel(seq1, seq2, table, gap_open, gap_extend, C, D, I):
    rows = len(seq1) + 1
    cols = len(seq2) + 1
    # Cells the recurrence never reads follow the same "C + gap_open" convention as row 0 of D
    C[0, 0] = 0.0
    D[0, 0] = gap_open
    I[0, 0] = gap_open
    t = gap_open
    for j in range(1, cols):
        t = t + gap_extend
        C[0, j] = t
        D[0, j] = t + gap_open
        I[0, j] = t + gap_open
    t = gap_open
    for i in range(1, rows):
        t = t + gap_extend
        C[i, 0] = t
        D[i, 0] = t + gap_open
        I[i, 0] = t + gap_open
        char_q = seq1[i - 1]
        for j in range(1, cols):
            i_ext = I[i, j - 1]
            i_open = C[i, j - 1] + gap_open
            I[i, j] = (i_ext if i_ext < i_open else i_open) + gap_extend
            d_ext = D[i - 1, j]
            d_open = C[i - 1, j] + gap_open
            D[i, j] = (d_ext if d_ext < d_open else d_open) + gap_extend
            best = D[i, j] if D[i, j] < I[i, j] else I[i, j]
            match = C[i - 1, j - 1] + table[char_q, seq2[j - 1]]
            C[i, j] = best if best < match else match
    return C[rows - 1, cols - 1]


@jit(nopython=True, cache=True, nogil=True)
def _linear_score_kernel(seq1, seq2, table, gap_open, gap_extend, CC, DD):
    rows = len(seq1) + 1
    cols = len(seq2) + 1
    CC[0] = 0.0
    DD[0] = gap_open
    t = gap_open
    for j in range(1, cols):
        t = t + gap_extend
        CC[j] = t
        DD[j] = t + gap_open
    t = gap_open
    for i in range(1, rows):
        # s: C[i-1, j-1], c: C[i, j-1], e: I[i, j-1]
        s = CC[0]
        t = t + gap_extend
        c = t
        CC[0] = c
        DD[0] = t + gap_open
        e = t + gap_open
        char_q = seq1[i - 1]
        for j in range(1, cols):
            e_open = c + gap_open
            e = (e if e < e_open else e_open) + gap_extend
            # CC[j] and DD[j] still hold row i-1 here
            d_open = CC[j] + gap_open
            DD[j] = (DD[j] if DD[j] < d_open else d_open) + gap_extend
            best = DD[j] if DD[j] < e else e
            match = s + table[char_q, seq2[j - 1]]
            c = best if best < match else match
            s = CC[j]
            CC[j] = c
    return CC[cols - 1]
