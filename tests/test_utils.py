from argparse import Namespace

from gotoh.utils import AlignConfig
from gotoh.utils.resources import RESOURCES, Resources, jit


class TestAlignConfig:
    def test_defaults(self):
        config = AlignConfig()
        assert (config.gap_open, config.gap_extend, config.match, config.mismatch) == (2.0, 0.5, 0.0, 1.0)
        assert config.alphabet_size == 128

    def test_from_args(self):
        args = Namespace(gap_open=3.0, gap_extend=None, mismatch=2.0, sequences=['A', 'C'])
        config = AlignConfig.from_args(args)
        assert config == AlignConfig(gap_open=3.0, mismatch=2.0)


class TestResources:
    def test_has_module(self):
        assert RESOURCES.has_module('numpy')
        assert not RESOURCES.has_module('surely_not_an_installed_module')

    def test_pool(self):
        resources = Resources()
        assert resources.pool.submit(sum, [1, 2, 3]).result() == 6
        resources.shutdown()
        assert RESOURCES.pool.submit(len, "AGT").result() == 3

    def test_jit(self):
        @jit(nopython=True, cache=False)
        def double(x): return x * 2

        @jit
        def triple(x): return x * 3

        assert double(2) == 4
        assert triple(2) == 6
