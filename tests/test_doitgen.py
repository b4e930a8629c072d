import numpy as np
import pytest

from polykernels import doitgen
from polykernels.common import DUMP_FINISH, DUMP_START


def test_init_array_shapes():
    A, C4 = doitgen.init_array(2, 3, 4)
    assert A.shape == (2, 3, 4)
    assert C4.shape == (4, 4)


def test_init_array_values_in_unit_interval():
    A, C4 = doitgen.init_array(3, 4, 5)
    assert A.min() >= 0.0 and A.max() < 1.0
    assert C4.min() >= 0.0 and C4.max() < 1.0
    assert np.array_equal(C4, C4.T)


def test_identity_c4_leaves_a_unchanged():
    A, _ = doitgen.init_array(2, 3, 4)
    result = doitgen.kernel_doitgen(2, 3, 4, A, np.eye(4))
    assert np.array_equal(result, A)


def test_scaled_identity_scales():
    A, _ = doitgen.init_array(2, 3, 4)
    result = doitgen.kernel_doitgen(2, 3, 4, A, 3 * np.eye(4))
    assert np.allclose(result, 3 * A)


def test_permutation_c4_permutes_last_axis():
    A, _ = doitgen.init_array(2, 2, 3)
    perm = np.eye(3)[[2, 0, 1]]
    result = doitgen.kernel_doitgen(2, 2, 3, A, perm)
    assert np.allclose(np.sort(result, axis=2), np.sort(A, axis=2))


def test_inputs_unchanged():
    A, C4 = doitgen.init_array(2, 3, 4)
    a_copy, c_copy = A.copy(), C4.copy()
    doitgen.kernel_doitgen(2, 3, 4, A, C4)
    assert np.array_equal(A, a_copy)
    assert np.array_equal(C4, c_copy)


def test_two_dimensional_a_raises():
    with pytest.raises(ValueError):
        doitgen.kernel_doitgen(2, 2, 2, np.zeros((2, 2)), np.eye(2))


def test_small_c4_raises():
    A, _ = doitgen.init_array(2, 3, 4)
    with pytest.raises(ValueError):
        doitgen.kernel_doitgen(2, 3, 4, A, np.eye(3))


def test_print_array_single_value():
    text = doitgen.print_array(1, 1, 1, [[[1.5]]])
    assert text == DUMP_START + "begin dump: A\n1.50 \nend   dump: A\n" + DUMP_FINISH


def test_print_array_value_count():
    A, _ = doitgen.init_array(2, 3, 4)
    text = doitgen.print_array(2, 3, 4, A)
    body = text.split("begin dump: A")[1].split("end   dump: A")[0]
    assert len(body.split()) == 24


def test_run_mini_shape():
    result, elapsed = doitgen.run("MINI")
    assert result.shape == (18, 16, 20)
    assert elapsed >= 0.0


def test_main_dump(capsys):
    assert doitgen.main(["--dataset", "mini", "--dump"]) == 0
    err = capsys.readouterr().err
    assert err.startswith(DUMP_START)
    assert err.endswith(DUMP_FINISH)