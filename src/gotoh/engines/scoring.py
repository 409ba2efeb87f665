"""Substitution costs and affine gap constants for alignment scoring."""
from typing import Union, Iterable

import numpy as np

from gotoh.core.alphabet import Alphabet
from gotoh.utils import AlignConfig


# Classes --------------------------------------------------------------------------------------------------------------
class ScoringModel:
    """
    An immutable cost model: a square substitution table indexed by symbol code plus the
    gap open (G) and gap extend (H) constants. A gap of length k costs ``G + k * H``.

    The table is built once and made read-only, so a single model can be shared between
    threads aligning different sequence pairs.

    Examples:
        >>> model = ScoringModel.build(128, match=0, mismatch=1)
        >>> model.cost('A', 'A'), model.cost('A', 'G')
        (0.0, 1.0)
    """
    _DTYPE = np.float64
    __slots__ = ('_data', '_data_t', '_alphabet', '_gap_open', '_gap_extend')

    def __init__(self, table: Union[np.ndarray, Iterable], gap_open: float = 2.0, gap_extend: float = 0.5,
                 alphabet: Alphabet = None):
        data = np.array(table, dtype=self._DTYPE)
        if data.ndim != 2 or data.shape[0] != data.shape[1] or data.shape[0] == 0:
            raise ValueError(f'Substitution table must be a non-empty square matrix, got shape {data.shape}')
        if not np.all(np.isfinite(data)): raise ValueError('Substitution table contains non-finite costs')
        gap_open, gap_extend = float(gap_open), float(gap_extend)
        if not (np.isfinite(gap_open) and np.isfinite(gap_extend)):
            raise ValueError(f'Gap constants must be finite, got open={gap_open}, extend={gap_extend}')
        if alphabet is None: alphabet = Alphabet(data.shape[0])
        elif len(alphabet) != data.shape[0]:
            raise ValueError(f'Substitution table of shape {data.shape} does not match {alphabet!r}')

        self._data = data
        self._data.flags.writeable = False
        self._data_t = np.ascontiguousarray(data.T)
        self._data_t.flags.writeable = False
        self._alphabet = alphabet
        self._gap_open = gap_open
        self._gap_extend = gap_extend

    def __getitem__(self, item): return self._data[item]
    def __array__(self, dtype=None, copy=None): return self._data.astype(dtype, copy=False) if dtype else self._data
    def __repr__(self):
        return f"ScoringModel{self._data.shape}(gap_open={self._gap_open}, gap_extend={self._gap_extend})"

    @property
    def shape(self): return self._data.shape
    @property
    def alphabet(self) -> Alphabet: return self._alphabet
    @property
    def gap_open(self) -> float: return self._gap_open
    @property
    def gap_extend(self) -> float: return self._gap_extend
    @property
    def table(self) -> np.ndarray: return self._data

    @property
    def transposed(self) -> np.ndarray:
        """The table with its axes swapped, i.e. ``transposed[b, a] == cost(a, b)``."""
        return self._data_t

    @property
    def is_symmetric(self) -> bool:
        """Whether ``cost(a, b) == cost(b, a)`` for every pair of symbols."""
        return bool(np.array_equal(self._data, self._data_t))

    @classmethod
    def build(cls, alphabet_size: int = 128, match: float = 0.0, mismatch: float = 1.0,
              gap_open: float = 2.0, gap_extend: float = 0.5) -> 'ScoringModel':
        """
        Builds a simple match/mismatch model over an alphabet of ``alphabet_size`` codes.

        Args:
            alphabet_size: Number of symbol codes.
            match: Cost of pairing a symbol with itself.
            mismatch: Cost of pairing two different symbols.
            gap_open: Cost charged once per gap.
            gap_extend: Cost charged per gap position.
        """
        alphabet = Alphabet(alphabet_size)
        m = np.full((alphabet_size, alphabet_size), mismatch, dtype=cls._DTYPE)
        np.fill_diagonal(m, match)
        return cls(m, gap_open=gap_open, gap_extend=gap_extend, alphabet=alphabet)

    @classmethod
    def from_config(cls, config: AlignConfig) -> 'ScoringModel':
        """Builds a match/mismatch model from an :class:`AlignConfig`."""
        return cls.build(config.alphabet_size, match=config.match, mismatch=config.mismatch,
                         gap_open=config.gap_open, gap_extend=config.gap_extend)

    def cost(self, a: Union[int, str, bytes], b: Union[int, str, bytes]) -> float:
        """
        Returns the substitution cost of pairing symbol ``a`` with symbol ``b``.

        Raises:
            AlphabetOutOfRange: If either symbol lies outside the alphabet.
        """
        return float(self._data[self._alphabet.code(a), self._alphabet.code(b)])

    def encode(self, seq) -> np.ndarray:
        """Encodes a sequence with this model's alphabet (see :meth:`Alphabet.encode`)."""
        return self._alphabet.encode(seq)


# Constants ------------------------------------------------------------------------------------------------------------
DEFAULT_MODEL = ScoringModel.build()
