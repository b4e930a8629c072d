import numpy as np
import pytest

from polykernels.common import DUMP_FINISH, DUMP_START
from polykernels.mm2 import init_array, kernel_2mm, main, print_array, run


@pytest.fixture
def mini_inputs():
    return init_array(3, 4, 5, 6)


def test_init_array_shapes_and_constants():
    alpha, beta, A, B, C, D = init_array(2, 3, 4, 5)
    assert (alpha, beta) == (1.5, 1.2)
    assert [M.shape for M in (A, B, C, D)] == [(2, 4), (4, 3), (3, 5), (2, 5)]
    assert A[0, 0] == 1 / 2
    assert D[0, 0] == 0.0


def test_zero_beta_and_identity_c():
    A = np.arange(6, dtype=float).reshape(2, 3)
    B = np.arange(6, dtype=float).reshape(3, 2)
    D = np.full((2, 2), 7.0)
    result = kernel_2mm(2, 2, 3, 2, 2.0, 0.0, A, B, np.eye(2), D)
    assert np.allclose(result, [[20.0, 26.0], [56.0, 80.0]])


def test_zero_alpha_scales_d(mini_inputs):
    _, beta, A, B, C, D = mini_inputs
    assert np.allclose(kernel_2mm(3, 4, 5, 6, 0.0, beta, A, B, C, D), beta * D)


def test_read_only_d_is_kept(mini_inputs):
    alpha, beta, A, B, C, D = mini_inputs
    original = D.copy()
    D.setflags(write=False)
    kernel_2mm(3, 4, 5, 6, alpha, beta, A, B, C, D)
    assert np.array_equal(D, original)


def test_too_small_raises(mini_inputs):
    with pytest.raises(ValueError):
        kernel_2mm(4, 4, 5, 6, *mini_inputs)


def test_print_array_format():
    assert print_array(1, 1, [[1.5]]) == (
        DUMP_START + "begin dump: D\n1.50 \nend   dump: D\n" + DUMP_FINISH
    )


def test_run_and_main(capsys):
    result, _ = run("MINI")
    assert result.shape == (32, 56)
    assert main(["--dataset", "MINI", "--dump"]) == 0
    err = capsys.readouterr().err
    assert err.startswith(DUMP_START) and err.endswith(DUMP_FINISH)