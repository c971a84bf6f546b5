"""Tests for Lorentz group construction, validation and classification."""

import math

import numpy as np
import pytest

from lorentz_kernel.pkgs.lorentz_core import (
    LorentzGroup, LorentzKernelError, SuperluminalVelocityError,
)


class TestBoostFromVelocity:

    def test_gamma_for_three_fifths_c(self, group):
        L = group.boost_from_velocity([0.6, 0, 0])
        assert L.get_gamma() == pytest.approx(1.25, abs=1e-10)
        assert np.allclose(L.get_beta(), [0.6, 0, 0])

    def test_superluminal_rejected(self, group):
        with pytest.raises(SuperluminalVelocityError):
            group.boost_from_velocity([1.1, 0, 0])

    def test_speed_of_light_rejected(self, group):
        with pytest.raises(SuperluminalVelocityError):
            group.boost_from_velocity([0.0, 0.6, 0.8])

    def test_error_hierarchy(self, group):
        with pytest.raises(LorentzKernelError):
            group.boost_from_velocity([2.0, 0, 0])
        with pytest.raises(ValueError):
            group.boost_from_velocity([2.0, 0, 0])

    def test_zero_velocity_is_identity(self, group):
        assert np.allclose(group.boost_from_velocity([0, 0, 0]).matrix, np.eye(4))

    @pytest.mark.parametrize("axis", [0, 1, 2])
    def test_single_axis_velocity(self, group, axis):
        beta = np.zeros(3)
        beta[axis] = -0.8
        L = group.boost_from_velocity(beta)
        assert L.get_gamma() == pytest.approx(1.0 / math.sqrt(1.0 - 0.64))
        assert np.allclose(L.get_beta(), beta)

    def test_oblique_velocity_is_per_axis_product(self, group, algebra):
        beta = np.array([0.3, -0.2, 0.4])
        L = group.boost_from_velocity(beta)
        xi = beta / np.linalg.norm(beta) * math.atanh(np.linalg.norm(beta))
        K1, K2, K3 = algebra.K
        expected = K3.exponentiate(xi[2]) @ K2.exponentiate(xi[1]) @ K1.exponentiate(xi[0])
        assert np.allclose(L.matrix, expected)
        assert np.allclose(L.boost_rapidity, xi)
        assert group.is_valid_transformation(L.matrix)

    def test_oblique_velocity_carries_rotation(self, group):
        beta = np.array([0.3, -0.2, 0.4])
        L = group.boost_from_velocity(beta)
        # A pure boost would be symmetric; the per-axis product is not
        assert not np.allclose(L.matrix, L.matrix.T)
        assert L.get_gamma() != pytest.approx(1.0 / math.sqrt(1.0 - beta @ beta))


class TestBoostAndRotation:

    def test_boost_per_axis(self, group):
        L = group.boost([0, 0.7, 0])
        assert L.matrix[0, 0] == pytest.approx(math.cosh(0.7))
        assert L.matrix[0, 2] == pytest.approx(math.sinh(0.7))
        assert L.boost_rapidity == (0.0, 0.7, 0.0)

    def test_boost_with_direction(self, group):
        L = group.boost([0.3, 0.4, 0.0], direction=[0, 0, 2])
        assert np.allclose(L.boost_rapidity, [0, 0, 0.5])
        assert L.matrix[0, 3] == pytest.approx(math.sinh(0.5))

    def test_zero_direction_rejected(self, group):
        with pytest.raises(ValueError):
            group.boost([0.1, 0, 0], direction=[0, 0, 0])

    def test_rotation(self, group):
        R = group.rotation([0, 0, math.pi / 2])
        assert np.allclose(R.transform([0, 1, 0, 0]), [0, 0, 1, 0])
        assert R.rotation_angle == (0.0, 0.0, math.pi / 2)

    def test_wrong_shape_rejected(self, group):
        with pytest.raises(ValueError):
            group.create_element(boost_rapidity=[0.1, 0.2])

    def test_huge_rapidity_does_not_raise(self, group):
        L = group.boost([800, 0, 0])
        assert L.get_gamma() == np.inf
        assert L.matrix[0, 1] == np.inf
        assert not np.isnan(L.matrix).any()

    def test_create_element_defaults_to_identity(self, group):
        assert np.array_equal(group.create_element().matrix, np.eye(4))


class TestMetricPreservation:

    def test_random_elements(self, group, rng, eta):
        for _ in range(20):
            xi = rng.uniform(-2, 2, 3)
            theta = rng.uniform(-math.pi, math.pi, 3)
            L = group.create_element(xi, theta).matrix
            assert np.allclose(L.T @ eta @ L, eta, atol=1e-9)

    def test_moderate_elements_validate(self, group, rng):
        for _ in range(20):
            L = group.create_element(rng.uniform(-1, 1, 3), rng.uniform(-1, 1, 3))
            assert group.is_valid_transformation(L.matrix)

    def test_invalid_matrix(self, group):
        M = np.eye(4)
        M[0, 1] = 0.5
        assert not group.is_valid_transformation(M)

    def test_scaled_identity_invalid(self, group):
        assert not group.is_valid_transformation(2 * np.eye(4))


class TestClassification:

    def test_restricted_component(self, group):
        L = group.create_element([0.4, 0.1, -0.3], [0.2, 0.5, 0.1])
        cls = group.classify_transformation(L.matrix)
        assert cls.is_proper and cls.is_orthochronous
        assert cls.type.startswith("SO+(3,1)")

    def test_parity(self, group):
        P = group.parity()
        assert group.is_valid_transformation(P.matrix)
        cls = group.classify_transformation(P.matrix)
        assert not cls.is_proper
        assert cls.is_orthochronous
        assert cls.type.startswith("O+(3,1)")

    def test_time_reversal(self, group):
        T = group.time_reversal()
        cls = group.classify_transformation(T.matrix)
        assert not cls.is_proper
        assert not cls.is_orthochronous
        assert cls.type.startswith("O-(3,1)")

    def test_pt(self, group):
        PT = group.parity().compose(group.time_reversal())
        assert np.array_equal(PT.matrix, -np.eye(4))
        cls = group.classify_transformation(PT.matrix)
        assert cls.is_proper
        assert not cls.is_orthochronous
        assert cls.type.startswith("SO-(3,1)")

    def test_flags_are_plain_bools(self, group):
        cls = group.classify_transformation(np.eye(4))
        assert type(cls.is_proper) is bool
        assert type(cls.is_orthochronous) is bool

    def test_classify_accepts_nested_lists(self, group):
        cls = group.classify_transformation([[1, 0, 0, 0], [0, 1, 0, 0], [0, 0, 1, 0], [0, 0, 0, 1]])
        assert cls.is_proper and cls.is_orthochronous


class TestTolerance:

    def test_custom_tolerance(self):
        loose = LorentzGroup(tol=1e-2)
        M = np.eye(4)
        M[1, 1] = 1.001
        assert loose.is_valid_transformation(M)
        assert not LorentzGroup().is_valid_transformation(M)


if __name__ == "__main__":
    pytest.main([__file__])
