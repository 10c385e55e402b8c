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
Information and entanglement measures of Gaussian states.

All measures are computed from the symplectic spectrum of the covariance
matrix, i.e. the moduli :math:`\nu_k` of the eigenvalues of
:math:`\Omega\mathbf{V}`. For physical states :math:`\nu_k\geq\hbar/2`.

Spectra sitting on the singular point of a measure (within ``tol``) drop out
of the corresponding sum or product. Spectra below the physical bound by more
than :data:`UNPHYSICAL_TOL` are not clamped: a warning is logged and the
measure evaluates to ``nan``.
"""
import numpy as np
from scipy.linalg import solve

from .basis import quadrature_indices, symplecticform, validate_modes
from .exceptions import BasisMismatch, HBAR_ERROR, SYMPLECTIC_ERROR
from .logger import create_logger

logger = create_logger(__name__)

UNPHYSICAL_TOL = 1e-10
"""float: distance below the physical bound of a spectrum beyond which a
state is reported as unphysical"""


def _conjugate_pairs(matrix):
    """Moduli of the imaginary parts of the eigenvalues of a real matrix whose
    spectrum comes in pairs :math:`\\pm i\\nu`, one per pair, ascending."""
    vals = np.linalg.eigvals(matrix)
    return np.sort(np.abs(vals.imag))[::2]


def _unphysical(values, bound, measure):
    below = values[values < bound - UNPHYSICAL_TOL]

    if below.size:
        logger.warning(
            "%s: spectrum %s lies below the physical bound %s, returning nan",
            measure,
            below,
            bound,
        )
        return True

    return False


def symplectic_spectrum(covar, basis):
    r"""Symplectic eigenvalues of a covariance matrix.

    Args:
        covar (array): :math:`2N\times 2N` covariance matrix
        basis (Basis): the basis ``covar`` is expressed in

    Returns:
        array: the :math:`N` symplectic eigenvalues in ascending order
    """
    return _conjugate_pairs(symplecticform(basis) @ covar)


def sympspectrum(state):
    r"""Symplectic eigenvalues of the covariance matrix of a Gaussian state.

    Args:
        state (GaussianState): the state

    Returns:
        array: the :math:`N` symplectic eigenvalues in ascending order, in the
        units of the state (no division by :math:`\hbar`)
    """
    return symplectic_spectrum(state.covar, state.basis)


def is_physical(state, tol=UNPHYSICAL_TOL):
    r"""Checks the uncertainty principle :math:`\mathbf{V}+i\frac{\hbar}{2}\Omega\geq 0`
    through the symplectic spectrum of the state.

    Args:
        state (GaussianState): the state
        tol (float): numerical tolerance

    Returns:
        bool: True if the covariance matrix is symmetric and all its symplectic
        eigenvalues are at least :math:`\hbar/2`
    """
    covar = state.covar

    if not np.allclose(covar, covar.T, atol=tol):
        return False

    return bool(np.all(sympspectrum(state) / state.hbar >= 0.5 - tol))


def purity(state):
    r"""Purity :math:`\mathrm{Tr}(\rho^2)` of a Gaussian state,

    .. math:: \mu = \frac{(\hbar/2)^N}{\sqrt{\det\mathbf{V}}}.

    Args:
        state (GaussianState): the state

    Returns:
        float: the purity, 1 for pure states
    """
    return float((state.hbar / 2) ** state.nmodes / np.sqrt(np.linalg.det(state.covar)))


def _entropy_terms(x):
    return (x + 0.5) * np.log(x + 0.5) - (x - 0.5) * np.log(x - 0.5)


def entropy_vn(state, tol=1e-15):
    r"""Von Neumann entropy of a Gaussian state,

    .. math:: S(\rho) = -\mathrm{Tr}(\rho\log\rho) = \sum_k f(\nu_k/\hbar),

    where :math:`\log` is the natural logarithm, :math:`\nu_k` the symplectic
    spectrum of the state and

    .. math:: f(x) = (x + 1/2) \log(x + 1/2) - (x - 1/2) \log(x - 1/2),

    with the convention :math:`0\log 0 = 0`.

    Args:
        state (GaussianState): the state
        tol (float): eigenvalues within ``tol`` of the logarithmic singularity
            at :math:`1/2` contribute nothing

    Returns:
        float: the entropy, ``nan`` if the state is unphysical
    """
    x = sympspectrum(state) / state.hbar

    if _unphysical(x, 0.5, "entropy_vn"):
        return np.nan

    x = x[x - 0.5 > tol]
    return float(np.sum(_entropy_terms(x)))


def fidelity(state1, state2, tol=1e-15):
    r"""Fidelity :math:`F(\rho,\sigma)=\mathrm{Tr}\sqrt{\sqrt{\rho}\sigma\sqrt{\rho}}`
    between two Gaussian states.

    With :math:`\mathbf{A}=\bar{\mathbf{r}}_2-\bar{\mathbf{r}}_1` and
    :math:`B=\mathbf{V}_1+\mathbf{V}_2`,

    .. math::
        F = \frac{e^{-\frac{1}{4}\mathbf{A}^T B^{-1}\mathbf{A}}}{\det(B/\hbar)^{1/4}}
            \sqrt{\prod_k \left(x_k + \sqrt{x_k^2-1}\right)},

    where :math:`\pm i\hbar x_k/2` are the eigenvalues of
    :math:`B^{-1}(\hbar^2\Omega/4 + \mathbf{V}_2\Omega\mathbf{V}_1)`.

    See: Banchi, Braunstein, and Pirandola, Phys. Rev. Lett. 115, 260501 (2015)

    Args:
        state1 (GaussianState): first state
        state2 (GaussianState): second state
        tol (float): eigenvalues within ``tol`` of the square root singularity
            at :math:`1` contribute nothing

    Returns:
        float: the fidelity, ``nan`` if the states are unphysical

    Raises:
        BasisMismatch: if the states use different bases or values of hbar
    """
    if state1.basis != state2.basis:
        raise BasisMismatch(SYMPLECTIC_ERROR)

    if state1.hbar != state2.hbar:
        raise BasisMismatch(HBAR_ERROR)

    hbar = state1.hbar

    for state in (state1, state2):
        if _unphysical(sympspectrum(state) / hbar, 0.5, "fidelity"):
            return np.nan

    A = state2.mean - state1.mean
    B = state1.covar + state2.covar
    output = np.exp(-(A @ solve(B, A)) / 4) / np.linalg.det(B / hbar) ** (1 / 4)

    omega = symplecticform(state1.basis)
    # hbar**2 / 4 * omega is Omega / 4 expressed in the units of the covariances
    M = solve(B, (hbar ** 2 / 4) * omega + state2.covar @ omega @ state1.covar)
    x = _conjugate_pairs(M) * (2 / hbar)
    x = x[x - 1 > tol]
    return float(output * np.sqrt(np.prod(x + np.sqrt(x ** 2 - 1))))


def partial_transpose(covar, basis, indices):
    r"""Covariance matrix of the partial transpose of a Gaussian state.

    Transposition is implemented by time reversal of the modes in
    ``indices``, :math:`\tilde{\mathbf{V}} = P\mathbf{V}P` where :math:`P`
    flips the sign of the momentum quadrature of those modes.

    Args:
        covar (array): :math:`2N\times 2N` covariance matrix
        basis (Basis): the basis ``covar`` is expressed in
        indices (int or Sequence[int]): modes of the transposed subsystem, counting from 1

    Returns:
        array: the partially transposed covariance matrix. ``covar`` is not modified.

    Raises:
        ModeIndexError: if an index is outside of ``[1, N]`` or repeated
    """
    modes = validate_modes(indices, basis.nmodes)
    tilde = np.array(covar, dtype=float)

    for mode in modes:
        _, p = quadrature_indices(basis, mode)
        tilde[:, p] *= -1
        tilde[p, :] *= -1

    return tilde


def logarithmic_negativity(state, indices, tol=1e-15):
    r"""Logarithmic negativity of a Gaussian state across the bipartition
    defined by ``indices``,

    .. math:: E_N(\rho) = \log\|\rho^{T_B}\|_1 = -\sum_k \log(2\tilde{\nu}_k),

    where the sum runs over the symplectic eigenvalues :math:`\tilde{\nu}_k`
    of :math:`\tilde{\mathbf{V}}/\hbar` smaller than :math:`1/2`, and
    :math:`\tilde{\mathbf{V}}` is given by :func:`partial_transpose`.

    Args:
        state (GaussianState): the state
        indices (int or Sequence[int]): modes of one side of the bipartition, counting from 1
        tol (float): eigenvalues below ``tol`` are discarded

    Returns:
        float: the logarithmic negativity, 0 for product states and ``nan``
        if the state is unphysical

    Raises:
        ModeIndexError: if an index is outside of ``[1, N]`` or repeated
    """
    tilde = partial_transpose(state.covar, state.basis, indices)

    if _unphysical(sympspectrum(state) / state.hbar, 0.5, "logarithmic_negativity"):
        return np.nan

    x = symplectic_spectrum(tilde, state.basis) / state.hbar
    x = x[(x > tol) & (x < 0.5)]
    return float(np.sum(-np.log(2 * x)))


def mean_photon(state):
    r"""Total mean photon number of a Gaussian state,

    .. math:: \langle \hat{n} \rangle = \frac{\mathrm{Tr}(\mathbf{V}) + |\bar{\mathbf{r}}|^2}{2\hbar} - \frac{N}{2}.

    Args:
        state (GaussianState): the state

    Returns:
        float: mean photon number summed over all modes
    """
    mu = state.mean
    return float((np.trace(state.covar) + mu @ mu) / (2 * state.hbar) - state.nmodes / 2)
