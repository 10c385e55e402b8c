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
"""
Default parameters, environment variables, fixtures, and common routines for the unit tests.
"""
# pylint: disable=redefined-outer-name
import os

import numpy as np
import pytest

from gausscv import GaussianState, QuadBlockBasis, QuadPairBasis
from gausscv.utils import random_covariance, random_symplectic

np.random.seed(42)


# defaults
TOL = 1e-6
HBAR = 1.7


@pytest.fixture(scope="session")
def tol():
    """Numerical tolerance for equality tests."""
    return float(os.environ.get("TOL", TOL))


@pytest.fixture(scope="session")
def hbar():
    """The value of hbar"""
    return float(os.environ.get("HBAR", HBAR))


@pytest.fixture(params=[QuadPairBasis, QuadBlockBasis])
def basis_type(request):
    """Both quadrature orderings."""
    return request.param


@pytest.fixture
def random_state(hbar):
    """Returns a function creating a random mixed Gaussian state."""

    def _random_state(basis, pure=False):
        n = basis.nmodes
        covar = random_covariance(n, hbar=hbar, pure=pure, basis=basis)
        mean = np.random.randn(2 * n)
        return GaussianState(mean, covar, basis=basis, hbar=hbar)

    return _random_state


@pytest.fixture
def random_symp():
    """Returns a function creating a random symplectic matrix in a given basis."""

    def _random_symp(basis, passive=False):
        return random_symplectic(basis.nmodes, passive=passive, basis=basis)

    return _random_symp
