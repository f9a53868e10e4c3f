"""Test configuration for vecmat tests."""

import jax
import pytest

from vecmat.core.primitives import FLOAT_DTYPE


def pytest_generate_tests(metafunc):
    """Run each test with JIT enabled and disabled, and in every dimension."""
    if "jit_mode" in metafunc.fixturenames:
        metafunc.parametrize("jit_mode", ["no_jit", "jit"])
    if "dimension" in metafunc.fixturenames:
        metafunc.parametrize("dimension", [2, 3, 4])


@pytest.fixture
def jit_mode(request):
    """Run the test body with JAX JIT compilation enabled or disabled."""
    with jax.disable_jit(request.param == "no_jit"):
        yield request.param


@pytest.fixture
def key():
    """Fixed PRNG key for random operands."""
    return jax.random.PRNGKey(42)


@pytest.fixture
def random_flat(key):
    """Factory for random flat buffers of a given length in [-1, 1]."""

    def make(length: int, index: int = 0):
        sub_key = jax.random.fold_in(key, index)
        return jax.random.uniform(
            sub_key, (length,), minval=-1.0, maxval=1.0, dtype=FLOAT_DTYPE
        )

    return make
