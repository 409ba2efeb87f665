"""
Module for representing alphabets of symbol codes
"""
from typing import Union, Final, ClassVar

import numpy as np


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlphabetError(Exception):
    """Raised when an alphabet is invalid or an operation is incompatible with the alphabet."""


class AlphabetOutOfRange(AlphabetError, ValueError):
    """Raised when a sequence contains a symbol whose code lies outside the alphabet."""


# Classes --------------------------------------------------------------------------------------------------------------
class Alphabet:
    """
    A contiguous alphabet of symbol codes ``0 .. size - 1``.

    Symbols are identified by their code, so the default 128-symbol alphabet is 7-bit ASCII
    and a character is encoded as its code point.

    Examples:
        >>> Alphabet.ASCII.encode('AGT')
        array([65, 71, 84], dtype=uint8)
    """
    __slots__ = ('_size',)
    DTYPE: Final = np.uint8
    MAX_LEN: Final = np.iinfo(DTYPE).max + 1

    ASCII: ClassVar['Alphabet']

    def __init__(self, size: int = 128):
        """
        Initializes an Alphabet.

        Args:
            size: The number of symbol codes in the alphabet.

        Raises:
            AlphabetError: If the size is not an integer between 1 and 256.
        """
        if not isinstance(size, (int, np.integer)) or isinstance(size, bool):
            raise AlphabetError(f'Alphabet size must be an integer, not {type(size).__name__}')
        if not 0 < size <= self.MAX_LEN:
            raise AlphabetError(f'Alphabet size must be between 1 and {self.MAX_LEN} ({self.DTYPE.__name__})')
        self._size = int(size)

    def __len__(self):
        return self._size

    def __contains__(self, item):
        if isinstance(item, (int, np.integer)) and not isinstance(item, bool):
            return 0 <= item < self._size
        if isinstance(item, (str, bytes)):
            if len(item) != 1: return False
            val = ord(item) if isinstance(item, str) else item[0]
            return val < self._size
        return False

    def __repr__(self):
        return f'Alphabet({self._size})'

    def __eq__(self, other):
        if self is other: return True
        if not isinstance(other, Alphabet): return False
        return self._size == other._size

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash(self._size)

    def code(self, symbol: Union[int, str, bytes]) -> int:
        """
        Returns the code of a single symbol.

        Args:
            symbol: An integer code or a one-character string / byte string.

        Raises:
            AlphabetOutOfRange: If the symbol is not part of the alphabet.
            TypeError: If the symbol is neither an integer nor a single character.
        """
        if isinstance(symbol, (str, bytes)):
            if len(symbol) != 1: raise TypeError(f'Expected a single symbol, got {symbol!r}')
            val = ord(symbol) if isinstance(symbol, str) else symbol[0]
        elif isinstance(symbol, (int, np.integer)) and not isinstance(symbol, bool):
            val = int(symbol)
        else:
            raise TypeError(f'Expected an integer code or a single character, got {type(symbol).__name__}')
        if not 0 <= val < self._size:
            raise AlphabetOutOfRange(f'Symbol {symbol!r} (code {val}) is outside the alphabet of size {self._size}')
        return val

    def encode(self, seq: Union[str, bytes, bytearray, np.ndarray]) -> np.ndarray:
        """
        Encodes a sequence into a read-only array of symbol codes.

        Args:
            seq: The sequence as a string (code points), bytes, or a 1-D integer array.

        Returns:
            A numpy uint8 array of codes.

        Raises:
            AlphabetOutOfRange: If any symbol code is outside the alphabet.
            TypeError: If the sequence type is not supported.
        """
        if isinstance(seq, str):
            codes = np.frombuffer(seq.encode('utf-32-le', 'surrogatepass'), dtype='<u4')
        elif isinstance(seq, (bytes, bytearray, memoryview)):
            codes = np.frombuffer(seq, dtype=np.uint8)
        elif isinstance(seq, (np.ndarray, list, tuple)):
            codes = np.asarray(seq)
            if codes.size == 0: codes = codes.astype(np.int64)
            if codes.ndim != 1 or not np.issubdtype(codes.dtype, np.integer):
                raise TypeError(f'Expected a 1-D integer array of symbol codes, got {codes.dtype} with shape {codes.shape}')
        else:
            raise TypeError(f'Cannot encode a sequence of type {type(seq).__name__}')

        if len(codes) and ((bad := np.flatnonzero((codes < 0) | (codes >= self._size))).size):
            pos = int(bad[0])
            val = int(codes[pos])
            symbol = seq[pos] if isinstance(seq, str) else val
            raise AlphabetOutOfRange(
                f'Symbol {symbol!r} (code {val}) at position {pos} is outside the alphabet of size {self._size}'
            )
        encoded = codes.astype(self.DTYPE)
        encoded.flags.writeable = False
        return encoded


# Constants ------------------------------------------------------------------------------------------------------------
Alphabet.ASCII = Alphabet(128)
