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
r"""
Random interferometers, symplectic matrices and covariance matrices, used to
generate test inputs and benchmarks.

All generators draw from NumPy's global random state, so ``np.random.seed``
makes them reproducible. Matrices are built in the block ordering and returned
in the interleaved ordering unless a :class:`~.QuadBlockBasis` is requested.
"""
import numpy as np
from scipy.linalg import qr
from thewalrus.symplectic import xxpp_to_xpxp

from .basis import QuadBlockBasis

__all__ = [
    "randnc",
    "random_covariance",
    "random_symplectic",
    "random_interferometer",
]


def randnc(*arg):
    """Array of standard complex normal random numbers."""
    return np.random.randn(*arg) + 1j * np.random.randn(*arg)


def _to_basis(matrix, basis):
    if isinstance(basis, QuadBlockBasis):
        return matrix
    return xxpp_to_xpxp(matrix)


def _real_form(U):
    """Orthogonal symplectic matrix, in the block ordering, of the passive
    transformation with transfer matrix ``U``."""
    return np.block([[U.real, -U.imag], [U.imag, U.real]])


def random_interferometer(N, real=False):
    r"""Haar distributed transfer matrix of an :math:`N` mode interferometer.

    The phases of the diagonal of :math:`R` in the QR decomposition of a
    Gaussian random matrix are absorbed into :math:`Q`, see :cite:`mezzadri2006`.

    Args:
        N (int): number of modes
        real (bool): draw a real orthogonal matrix instead of a unitary one

    Returns:
        array: :math:`N\times N` unitary matrix
    """
    z = np.random.randn(N, N) if real else randnc(N, N) / np.sqrt(2.0)
    q, r = qr(z)
    d = np.diagonal(r)
    return q * (d / np.abs(d))


def random_symplectic(N, passive=False, scale=1.0, basis=None):
    r"""Random symplectic matrix.

    Active transformations are the Bloch-Messiah product of an interferometer,
    single mode squeezers and a second interferometer. The squeezing
    parameters are the moduli of complex normal numbers times ``scale``.

    Args:
        N (int): number of modes
        passive (bool): only return the first interferometer, which conserves
            the photon number
        scale (float): scale of the squeezing parameters
        basis (Basis): quadrature ordering of the result, interleaved if ``None``

    Returns:
        array: :math:`2N\times 2N` symplectic matrix
    """
    S = _real_form(random_interferometer(N))

    if not passive:
        r = scale * np.abs(randnc(N))
        squeezers = np.diag(np.exp(np.concatenate([-r, r])))
        S = S @ squeezers @ _real_form(random_interferometer(N))

    return _to_basis(S, basis)


def random_covariance(N, hbar=2, pure=False, basis=None):
    r"""Covariance matrix of a random Gaussian state.

    Mixed states are random symplectic transformations of thermal states with
    mean photon numbers drawn uniformly from :math:`[0, 1)`; pure states
    transform the vacuum.

    Args:
        N (int): number of modes
        hbar (float): the value of :math:`\hbar`
        pure (bool): return the covariance matrix of a pure state
        basis (Basis): quadrature ordering of the result, interleaved if ``None``

    Returns:
        array: :math:`2N\times 2N` covariance matrix
    """
    S = random_symplectic(N, basis=basis)
    nbar = np.zeros(N) if pure else np.random.random(N)
    thermal = (hbar / 2) * _to_basis(np.diag(np.tile(2 * nbar + 1, 2)), basis)
    return S @ thermal @ S.T
