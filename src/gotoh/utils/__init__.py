"""
Module containing configuration helpers shared by the library and the command line.
"""
from argparse import Namespace
from dataclasses import dataclass, fields


# Classes --------------------------------------------------------------------------------------------------------------
@dataclass
class Config:
    """
    Config parent class that can conveniently set attributes from CLI args
    """

    @classmethod
    def from_args(cls, args: Namespace):
        """
        Sets attributes of the class from a Namespace object (e.g. from argparse)

        Parameters
        ----------
        args : :class:`argparse.Namespace`
            :class:`argparse.Namespace` object containing attributes to set

        Returns
        -------
        cls
            Class instance with attributes set from args

        """
        return cls(**{f.name: getattr(args, f.name) for f in fields(cls) if getattr(args, f.name, None) is not None})


@dataclass
class AlignConfig(Config):
    """
    Scoring parameters for an affine-gap global alignment.

    The defaults reproduce the classic setup: a match is free, a mismatch costs 1,
    and a gap of length k costs ``gap_open + k * gap_extend``.
    """
    gap_open: float = 2.0
    gap_extend: float = 0.5
    match: float = 0.0
    mismatch: float = 1.0
    alphabet_size: int = 128
