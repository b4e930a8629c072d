import numpy as np
import pytest

from polykernels import mm3
from polykernels.common import DUMP_FINISH, DUMP_START


def test_init_array_shapes():
    A, B, C, D = mm3.init_array(3, 4, 5, 6, 7)
    assert A.shape == (3, 5)
    assert B.shape == (5, 4)
    assert C.shape == (4, 7)
    assert D.shape == (7, 6)


def test_init_array_first_row_of_a():
    A, _, _, _ = mm3.init_array(2, 3, 4, 5, 6)
    assert np.allclose(A[0], 0.1)


def test_init_values_bounded():
    for array in mm3.init_array(5, 6, 7, 8, 9):
        assert array.min() >= 0.0
        assert array.max() < 0.2


def test_identity_inputs_give_identity():
    eye = np.eye(4)
    E, F, G = mm3.kernel_3mm(4, 4, 4, 4, 4, eye, eye, eye, eye)
    assert np.array_equal(E, eye)
    assert np.array_equal(F, eye)
    assert np.array_equal(G, eye)


def test_scalar_multiples_multiply():
    eye = np.eye(3)
    _, _, G = mm3.kernel_3mm(3, 3, 3, 3, 3, 2 * eye, 3 * eye, 5 * eye, 7 * eye)
    assert np.allclose(G, 210 * eye)


def test_identity_b_and_d_pass_through():
    A, _, C, _ = mm3.init_array(3, 3, 3, 3, 3)
    eye = np.eye(3)
    E, F, _ = mm3.kernel_3mm(3, 3, 3, 3, 3, A, eye, C, eye)
    assert np.allclose(E, A)
    assert np.allclose(F, C)


def test_inputs_unchanged():
    arrays = mm3.init_array(3, 4, 5, 6, 7)
    copies = [a.copy() for a in arrays]
    mm3.kernel_3mm(3, 4, 5, 6, 7, *arrays)
    for original, copy in zip(arrays, copies):
        assert np.array_equal(original, copy)


def test_too_small_input_raises():
    A, B, C, D = mm3.init_array(3, 4, 5, 6, 7)
    with pytest.raises(ValueError):
        mm3.kernel_3mm(4, 4, 5, 6, 7, A, B, C, D)


def test_print_array_single_value():
    text = mm3.print_array(1, 1, [[1.5]])
    assert text == DUMP_START + "begin dump: G\n1.50 \nend   dump: G\n" + DUMP_FINISH


def test_run_mini_shape():
    G, elapsed = mm3.run("mini")
    assert G.shape == (32, 56)
    assert elapsed >= 0.0


def test_main_dump(capsys):
    assert mm3.main(["--dataset", "MINI", "--dump"]) == 0
    err = capsys.readouterr().err
    assert err.startswith(DUMP_START)
    assert err.endswith(DUMP_FINISH)
    assert "begin dump: G" in err