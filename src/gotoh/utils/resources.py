"""
Optional Numba acceleration and the worker pool used for batch alignment.
"""
from functools import cached_property, lru_cache
from importlib import import_module
from concurrent.futures import ThreadPoolExecutor
import atexit
import os
from typing import Callable


# Classes --------------------------------------------------------------------------------------------------------------
class Resources:
    """
    Process-wide state created on first use: the thread pool behind :func:`gotoh.align_many`
    and the record of which optional packages import.
    """
    def __init__(self) -> None:
        atexit.register(self.shutdown)

    @cached_property
    def pool(self) -> ThreadPoolExecutor:
        """Worker threads for independent alignments; compiled kernels run without the GIL."""
        try: cpus = os.process_cpu_count()
        except AttributeError: cpus = os.cpu_count()
        return ThreadPoolExecutor(min(32, (cpus or 1) + 4))

    def shutdown(self):
        if 'pool' in self.__dict__: self.pool.shutdown(wait=False, cancel_futures=True)

    @staticmethod
    @lru_cache(maxsize=None)
    def has_module(module_name: str) -> bool:
        """Whether ``module_name`` can be imported."""
        try:
            import_module(module_name)
            return True
        except ImportError: return False


# Decorators -----------------------------------------------------------------------------------------------------------
def jit(signature_or_function=None, **options) -> Callable:
    """
    Compiles a DP kernel with ``numba.jit`` when Numba is installed, otherwise leaves it as plain Python.

    Works bare (``@jit``) or with compilation options (``@jit(nopython=True, nogil=True)``); the
    options are ignored without Numba.
    """
    if RESOURCES.has_module('numba'):
        from numba import jit as numba_jit
        return numba_jit(signature_or_function) if callable(signature_or_function) else \
            numba_jit(signature_or_function, **options)
    if callable(signature_or_function): return signature_or_function
    return lambda func: func


# Constants ------------------------------------------------------------------------------------------------------------
RESOURCES = Resources()
