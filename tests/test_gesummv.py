import numpy as np
import pytest

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset
from polykernels.gesummv import init_array, kernel_gesummv, main, print_array, run


def test_init_array_shapes_and_invariants():
    alpha, beta, A, B, x = init_array(7)
    assert (alpha, beta) == (1.5, 1.2)
    assert A.shape == B.shape == (7, 7)
    assert x[0] == 0.0
    assert np.all(np.diff(x) > 0)
    assert np.all((x >= 0) & (x < 1))
    assert np.array_equal(A, A.T)
    assert np.array_equal(B, B.T)


def test_identity_matrices_scale_x():
    x = np.array([1.0, -2.0, 3.0])
    y = kernel_gesummv(3, 1.5, 1.2, np.eye(3), np.eye(3), x)
    assert np.allclose(y, (1.5 + 1.2) * x)


def test_zero_x_gives_zero():
    _, _, A, B, _ = init_array(5)
    y = kernel_gesummv(5, 1.5, 1.2, A, B, np.zeros(5))
    assert np.array_equal(y, np.zeros(5))


def test_swapping_matrices_swaps_scalars():
    alpha, beta, A, B, x = init_array(6)
    first = kernel_gesummv(6, alpha, beta, A, B, x)
    second = kernel_gesummv(6, beta, alpha, B, A, x)
    assert np.allclose(first, second)


def test_linear_in_x():
    alpha, beta, A, B, x = init_array(6)
    once = kernel_gesummv(6, alpha, beta, A, B, x)
    twice = kernel_gesummv(6, alpha, beta, A, B, 2 * x)
    assert np.allclose(twice, 2 * once)


def test_inputs_are_not_modified():
    alpha, beta, A, B, x = init_array(4)
    copies = (A.copy(), B.copy(), x.copy())
    kernel_gesummv(4, alpha, beta, A, B, x)
    assert all(np.array_equal(a, b) for a, b in zip(copies, (A, B, x)))


def test_too_small_input_raises():
    alpha, beta, A, B, x = init_array(3)
    with pytest.raises(ValueError):
        kernel_gesummv(4, alpha, beta, A, B, x)


def test_print_array_format():
    text = print_array(1, [0.25])
    assert text == DUMP_START + "begin dump: y\n0.25 \nend   dump: y\n" + DUMP_FINISH


def test_run_mini_size():
    y, elapsed = run("MINI")
    assert y.shape == (30,)
    assert elapsed >= 0


def test_main_dump(capsys):
    assert main(["--dataset", "mini", "--dump"]) == 0
    err = capsys.readouterr().err
    assert err.startswith(DUMP_START)
    assert "end   dump: y" in err


def test_run_accepts_enum():
    by_enum, _ = run(Dataset.MINI)
    by_name, _ = run("MINI")
    assert by_enum.shape == (30,)
    assert np.array_equal(by_enum, by_name)