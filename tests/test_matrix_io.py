import numpy as np
import pytest
from gotoh.engines.pairwise import QuadraticAligner, LinearAligner
from gotoh.io import format_value, format_matrix, format_matrices, format_buffers


class TestFormatValue:
    def test_two_decimals(self):
        assert format_value(2.5) == '2.50'
        assert format_value(0) == '0.00'
        assert format_value(1 / 3) == '0.33'

    def test_undefined(self):
        assert format_value(np.nan) == 'undef'
        assert format_value(QuadraticAligner.UNDEFINED) == 'undef'


class TestFormatMatrix:
    def test_rows_and_tabs(self):
        assert format_matrix(np.array([[0, 2.5], [1, 3]])) == '0.00\t2.50\n1.00\t3.00\n'

    def test_undefined_cells(self):
        m = np.array([[0.0, np.nan], [np.nan, 1.0]])
        assert format_matrix(m) == '0.00\tundef\nundef\t1.00\n'

    def test_allocated_matrices_render_undef(self):
        empty = QuadraticAligner().allocate(1, 1)
        assert format_matrix(empty.C) == 'undef\tundef\nundef\tundef\n'

    def test_not_2d(self):
        with pytest.raises(ValueError, match="2-D"):
            format_matrix(np.zeros(3))


class TestFormatResults:
    def test_matrices(self):
        text = format_matrices(QuadraticAligner().align('A', 'A'))
        assert text == (
            'Array C\n0.00\t2.50\n2.50\t0.00\n'
            '\n'
            'Array D\n2.00\t4.50\n4.50\t5.00\n'
            '\n'
            'Array I\n2.00\t4.50\n4.50\t5.00\n'
        )
        assert 'undef' not in text

    def test_buffers(self):
        cc, dd = LinearAligner().buffers('AGT', 'AG')
        assert format_buffers(cc, dd) == 'Array CC\n3.50 3.00 2.50\nArray DD\n5.50 3.00 2.50\n'
