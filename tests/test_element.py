"""Tests for GroupElement: action on vectors, composition and inversion."""

import logging
import math

import numpy as np
import pytest
import torch

from lorentz_kernel.pkgs.lorentz_core import GroupElement


class TestTransform:

    def test_boost_transforms_rest_event(self, group):
        L = group.boost_from_velocity([0.6, 0, 0])
        assert np.allclose(L.transform([1, 0, 0, 0]), [1.25, 0.75, 0, 0])

    def test_interval_invariance(self, group, rng, interval):
        for _ in range(10):
            L = group.create_element(rng.uniform(-1.5, 1.5, 3), rng.uniform(-3, 3, 3))
            x = rng.normal(size=4)
            assert interval(L.transform(x)) == pytest.approx(interval(x), abs=1e-9)

    def test_wrong_length_rejected(self, group):
        with pytest.raises(ValueError):
            group.rotation([0, 0, 1]).transform([1, 2, 3])


class TestBatchTransform:

    def test_numpy_batch_matches_single(self, group, rng):
        L = group.create_element([0.2, -0.4, 0.1], [0.3, 0.0, -0.7])
        xs = rng.normal(size=(5, 4))
        out = L.transform_batch(xs)
        assert out.shape == (5, 4)
        for x, y in zip(xs, out):
            assert np.allclose(L.transform(x), y)

    def test_torch_batch(self, group):
        L = group.boost_from_velocity([0, 0.6, 0])
        xs = torch.tensor([[1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0]], dtype=torch.float64)
        out = L.transform_batch(xs)
        assert isinstance(out, torch.Tensor)
        assert out.dtype == torch.float64
        expected = torch.tensor([[1.25, 0.0, 0.75, 0.0], [0.75, 0.0, 1.25, 0.0]], dtype=torch.float64)
        assert torch.allclose(out, expected)

    def test_leading_dimensions_kept(self, group, rng):
        L = group.rotation([0.1, 0.2, 0.3])
        out = L.transform_batch(rng.normal(size=(2, 3, 4)))
        assert out.shape == (2, 3, 4)

    def test_bad_trailing_dimension(self, group):
        with pytest.raises(ValueError):
            group.rotation([0, 0, 1]).transform_batch(np.zeros((3, 3)))


class TestComposition:

    def test_collinear_rapidities_add(self, group):
        L = group.boost([0.2, 0, 0]).compose(group.boost([0.3, 0, 0]))
        assert L.get_gamma() == pytest.approx(math.cosh(0.5))
        assert np.allclose(L.matrix, group.boost([0.5, 0, 0]).matrix)

    def test_other_acts_first(self, group):
        B = group.boost([0.5, 0, 0])
        R = group.rotation([0, 0, math.pi / 2])
        x = np.array([1.0, 0.3, -0.2, 0.7])
        assert np.allclose(R.compose(B).transform(x), R.transform(B.transform(x)))

    def test_non_collinear_order_matters(self, group):
        Bx = group.boost([0.8, 0, 0])
        By = group.boost([0, 0.8, 0])
        assert not np.allclose(Bx.compose(By).matrix, By.compose(Bx).matrix)

    def test_composed_element_has_zero_parameters(self, group):
        L = group.boost([0.2, 0, 0]).compose(group.rotation([0, 0.1, 0]))
        assert L.boost_rapidity == (0.0, 0.0, 0.0)
        assert L.rotation_angle == (0.0, 0.0, 0.0)

    def test_parameter_order_boosts_then_rotations(self, algebra, group):
        xi, theta = [0.3, 0.0, 0.0], [0.0, 0.0, 0.4]
        L = group.create_element(xi, theta)
        expected = algebra.J[2].exponentiate(0.4) @ algebra.K[0].exponentiate(0.3)
        assert np.allclose(L.matrix, expected)


class TestInverse:

    def test_inverse_law(self, group, rng):
        for _ in range(10):
            L = group.create_element(rng.uniform(-2, 2, 3), rng.uniform(-3, 3, 3))
            assert np.allclose(L.compose(L.inverse()).matrix, np.eye(4), atol=1e-8)
            assert np.allclose(L.inverse().compose(L).matrix, np.eye(4), atol=1e-8)

    def test_inverse_boost_reverses_velocity(self, group):
        L = group.boost_from_velocity([0, 0, 0.7])
        assert np.allclose(L.inverse().get_beta(), [0, 0, -0.7])
        assert L.inverse().get_gamma() == pytest.approx(L.get_gamma())

    def test_inverse_of_discrete(self, group):
        P = group.parity()
        assert np.array_equal(P.inverse().matrix, P.matrix)


class TestElementValue:

    def test_matrix_is_read_only(self, group):
        L = group.boost([0.1, 0, 0])
        with pytest.raises(ValueError):
            L.matrix[0, 0] = 2.0

    def test_fields_are_frozen(self, group):
        L = group.boost([0.1, 0, 0])
        with pytest.raises(AttributeError):
            L.matrix = np.eye(4)

    def test_get_matrix_returns_copy(self, group):
        L = group.boost([0.1, 0, 0])
        M = L.get_matrix()
        M[0, 0] = 99.0
        assert L.matrix[0, 0] == pytest.approx(math.cosh(0.1))

    def test_from_matrix(self):
        el = GroupElement.from_matrix(np.diag([1.0, -1.0, 1.0, 1.0]))
        assert el.boost_rapidity == (0.0, 0.0, 0.0)
        assert el.matrix[1, 1] == -1.0

    def test_from_matrix_wrong_shape(self):
        with pytest.raises(ValueError):
            GroupElement.from_matrix(np.eye(3))

    def test_to_torch(self, group):
        L = group.rotation([0.4, 0, 0])
        T = L.to_torch()
        assert T.shape == (4, 4)
        assert np.allclose(T.numpy(), L.matrix)

    def test_digest(self, group):
        a = group.boost([0.25, 0, 0])
        b = group.boost([0.25, 0, 0])
        c = group.boost([0.26, 0, 0])
        assert a.digest() == b.digest()
        assert a.digest() != c.digest()
        assert len(a.digest()) == 64


class TestConstructionLogging:

    def test_parametric_and_raw_paths_log(self, group, caplog):
        with caplog.at_level(logging.DEBUG, logger="lorentz_kernel.pkgs.lorentz_core.element"):
            group.create_element([0.1, 0, 0], [0, 0, 0.2])
            GroupElement.from_matrix(np.eye(4))
        messages = [r.getMessage() for r in caplog.records]
        assert "Element from 2 generator exponentials" in messages
        assert "Element from raw matrix" in messages


if __name__ == "__main__":
    pytest.main([__file__])
