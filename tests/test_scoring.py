import numpy as np
import pytest
from gotoh.core.alphabet import Alphabet, AlphabetOutOfRange
from gotoh.engines.scoring import ScoringModel, DEFAULT_MODEL
from gotoh.utils import AlignConfig


class TestScoringModelBuild:
    def test_default_costs(self):
        model = ScoringModel.build()
        assert model.shape == (128, 128)
        assert model.cost('A', 'A') == 0.0
        assert model.cost('A', 'G') == 1.0
        assert model.cost(0, 127) == 1.0
        assert model.gap_open == 2.0
        assert model.gap_extend == 0.5

    def test_custom_costs(self):
        model = ScoringModel.build(4, match=-1, mismatch=3, gap_open=5, gap_extend=1)
        np.testing.assert_array_equal(np.diag(model.table), [-1] * 4)
        assert model[0, 1] == 3
        assert model.alphabet == Alphabet(4)
        assert (model.gap_open, model.gap_extend) == (5.0, 1.0)

    def test_default_model(self):
        assert DEFAULT_MODEL.cost('C', 'C') == 0.0
        assert DEFAULT_MODEL.cost('C', 'T') == 1.0

    def test_from_config(self):
        model = ScoringModel.from_config(AlignConfig(gap_open=3.0, mismatch=2.0, alphabet_size=20))
        assert model.shape == (20, 20)
        assert model.cost(1, 2) == 2.0
        assert model.gap_open == 3.0
        assert model.gap_extend == 0.5


class TestScoringModelValidation:
    def test_table_is_read_only(self):
        model = ScoringModel.build(4)
        with pytest.raises(ValueError):
            model.table[0, 0] = 5

    def test_input_table_is_copied(self):
        data = np.zeros((3, 3))
        model = ScoringModel(data)
        data[0, 1] = 9
        assert model.cost(0, 1) == 0.0

    def test_non_square(self):
        with pytest.raises(ValueError, match="square"):
            ScoringModel(np.zeros((3, 4)))

    def test_non_finite_table(self):
        data = np.zeros((3, 3))
        data[1, 2] = np.nan
        with pytest.raises(ValueError, match="non-finite"):
            ScoringModel(data)

    def test_non_finite_gaps(self):
        with pytest.raises(ValueError, match="finite"):
            ScoringModel(np.zeros((3, 3)), gap_open=np.inf)

    def test_alphabet_mismatch(self):
        with pytest.raises(ValueError, match="does not match"):
            ScoringModel(np.zeros((3, 3)), alphabet=Alphabet(4))

    def test_cost_out_of_alphabet(self):
        with pytest.raises(AlphabetOutOfRange):
            ScoringModel.build(4).cost(0, 4)
        with pytest.raises(AlphabetOutOfRange):
            DEFAULT_MODEL.cost('A', 'é')

    def test_cost_rejects_fractional_codes(self):
        with pytest.raises(TypeError):
            ScoringModel.build(4).cost(2.9, 1)


class TestScoringModelSymmetry:
    def test_default_is_symmetric(self):
        assert DEFAULT_MODEL.is_symmetric

    def test_transposed(self):
        data = np.arange(9, dtype=float).reshape(3, 3)
        model = ScoringModel(data)
        assert not model.is_symmetric
        np.testing.assert_array_equal(model.transposed, data.T)
        assert model.transposed[2, 0] == model.cost(0, 2)
        assert model.transposed.flags.c_contiguous
        assert not model.transposed.flags.writeable