import numpy as np
import pytest

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset
from polykernels.gemm import SIZES, init_array, kernel_gemm, main, print_array, run


def test_init_array_scalars_and_shapes():
    alpha, beta, C, A, B = init_array(4, 5, 6)
    assert alpha == 1.5
    assert beta == 1.2
    assert C.shape == (4, 5)
    assert A.shape == (4, 6)
    assert B.shape == (6, 5)


def test_init_array_structure():
    _, _, C, A, B = init_array(4, 5, 6)
    assert np.all(A[0] == 0.0)
    assert np.all(B[0] == 0.0)
    assert np.allclose(C[0], 1 / 4)
    for matrix in (C, A, B):
        assert np.all((matrix >= 0.0) & (matrix < 1.0))


def test_identity_a_gives_scaled_sum():
    rng = np.random.default_rng(5)
    C = rng.normal(size=(3, 4))
    B = rng.normal(size=(3, 4))
    result = kernel_gemm(3, 4, 3, 2.0, 0.5, C, np.eye(3), B)
    assert np.allclose(result, 0.5 * C + 2.0 * B)


def test_zero_alpha_only_scales_c():
    _, _, C, A, B = init_array(3, 4, 5)
    result = kernel_gemm(3, 4, 5, 0.0, 1.2, C, A, B)
    assert np.allclose(result, 1.2 * C)


def test_linear_in_alpha():
    _, _, C, A, B = init_array(5, 6, 7)
    one = kernel_gemm(5, 6, 7, 1.0, 0.0, C, A, B)
    three = kernel_gemm(5, 6, 7, 3.0, 0.0, C, A, B)
    assert np.allclose(three, 3.0 * one)


def test_inputs_are_not_modified():
    alpha, beta, C, A, B = init_array(3, 3, 3)
    before = C.copy()
    kernel_gemm(3, 3, 3, alpha, beta, C, A, B)
    assert np.array_equal(C, before)


def test_rejects_small_arrays():
    with pytest.raises(ValueError):
        kernel_gemm(3, 3, 3, 1.0, 1.0, np.zeros((2, 3)), np.zeros((3, 3)), np.zeros((3, 3)))


def test_print_array_layout():
    C = np.full((2, 3), 0.5)
    text = print_array(2, 3, C)
    assert text.startswith(DUMP_START + "begin dump: C\n")
    assert text.endswith("\nend   dump: C\n" + DUMP_FINISH)
    body = text[text.index("dump: C") + 7:text.index("\nend")]
    assert body.split() == ["0.50"] * 6


def test_run_uses_dataset_size():
    result, elapsed = run(Dataset.MINI)
    ni, nj, _ = SIZES[Dataset.MINI]
    assert result.shape == (ni, nj)
    assert elapsed >= 0.0


def test_main_prints_time_and_dump(capsys):
    assert main(["--dataset", "mini", "--time", "--dump"]) == 0
    captured = capsys.readouterr()
    assert float(captured.out.strip()) >= 0.0
    assert "begin dump: C" in captured.err