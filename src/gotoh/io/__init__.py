"""
Module for rendering alignment results as text.
"""
from gotoh.io.matrix import format_value, format_matrix, format_matrices, format_buffers

__all__ = ['format_value', 'format_matrix', 'format_matrices', 'format_buffers']
