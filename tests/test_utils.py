# Copyright 2024 Xanadu Quantum Technologies Inc.

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#     http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
r"""Unit tests for the random matrix utilities"""
import numpy as np
import pytest

from gausscv import GaussianState, is_physical, purity
from gausscv.basis import symplecticform
from gausscv.utils import random_covariance, random_interferometer, random_symplectic

pytestmark = pytest.mark.frontend


class TestRandomMatrices:
    """Tests for the random matrix generators"""

    @pytest.mark.parametrize("real", [False, True])
    def test_interferometer(self, real, tol):
        """Test that a random interferometer is unitary"""
        U = random_interferometer(4, real=real)
        assert np.allclose(U @ U.conj().T, np.identity(4), atol=tol, rtol=0)
        assert np.isrealobj(U) == real

    @pytest.mark.parametrize("passive", [False, True])
    def test_symplectic(self, passive, basis_type, tol):
        """Test that a random symplectic matrix preserves the symplectic form"""
        basis = basis_type(3)
        S = random_symplectic(3, passive=passive, basis=basis)
        omega = symplecticform(basis)
        assert np.allclose(S @ omega @ S.T, omega, atol=tol, rtol=0)

    def test_passive_orthogonal(self, tol):
        """Test that passive transformations are orthogonal"""
        S = random_symplectic(2, passive=True)
        assert np.allclose(S @ S.T, np.identity(4), atol=tol, rtol=0)

    @pytest.mark.parametrize("pure", [False, True])
    def test_covariance(self, pure, hbar, basis_type, tol):
        """Test that a random covariance matrix describes a physical state"""
        basis = basis_type(2)
        V = random_covariance(2, hbar=hbar, pure=pure, basis=basis)
        state = GaussianState(np.zeros(4), V, basis=basis, hbar=hbar)

        assert np.allclose(V, V.T, atol=tol, rtol=1e-10)
        assert is_physical(state)
        assert np.isclose(purity(state), 1, atol=tol, rtol=0) == pure
