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
Factories for frequently used Gaussian states, unitaries and channels.

Each factory accepts a ``basis`` (by default a single mode
:class:`~.QuadPairBasis`, or two modes for the two-mode presets) and the
value of :math:`\hbar` (default 2, for which the vacuum covariance matrix is the
identity). Scalar parameters are used for every mode of a multimode basis;
sequences provide one value per mode, or one value per pair of modes for the
two-mode presets.

Position and momentum are related to the ladder operators by
:math:`\x = \sqrt{\hbar/2}(\a+\ad)` and :math:`\p = -i\sqrt{\hbar/2}(\a-\ad)`.
"""
import numpy as np
from scipy.linalg import block_diag
from thewalrus.symplectic import (
    beam_splitter,
    rotation,
    squeezing,
    two_mode_squeezing,
    xxpp_to_xpxp,
)

from .basis import QuadPairBasis
from .compose import changebasis
from .operators import GaussianChannel, GaussianUnitary
from .states import GaussianState

__all__ = [
    "vacuumstate",
    "thermalstate",
    "coherentstate",
    "squeezedstate",
    "eprstate",
    "displace",
    "phaseshift",
    "squeeze",
    "twosqueeze",
    "beamsplitter",
    "attenuator",
    "amplifier",
]


def _per_block(value, count, name):
    """Broadcasts a scalar parameter, or checks a sequence holds one value per block."""
    values = np.atleast_1d(value)

    if values.ndim != 1:
        raise ValueError("{} must be a scalar or a one dimensional sequence".format(name))

    if values.size == 1:
        return np.repeat(values, count)

    if values.size != count:
        raise ValueError(
            "{} has {} entries, expected 1 or {}".format(name, values.size, count)
        )

    return values


def _pairs(basis):
    if basis.nmodes % 2 != 0:
        raise ValueError("Two-mode presets require an even number of modes")
    return basis.nmodes // 2


def _assemble(cls, vectors, matrices, basis, hbar):
    """Builds a Gaussian object from per-block arrays given in the interleaved
    ordering, and expresses it in ``basis``."""
    fields = [np.concatenate(vectors)] + [block_diag(*blocks) for blocks in matrices]
    obj = cls(*fields, basis=QuadPairBasis(basis.nmodes), hbar=hbar)

    if isinstance(basis, QuadPairBasis):
        return obj

    return changebasis(obj, basis)


def _displacement(alpha, hbar):
    return np.sqrt(2 * hbar) * np.array([np.real(alpha), np.imag(alpha)])


# ------------------------------------------------------------------------
# States                                                                |
# ------------------------------------------------------------------------


def vacuumstate(basis=None, hbar=2.0):
    r"""Vacuum state, :math:`\bar{\mathbf{r}}=0` and :math:`\mathbf{V}=(\hbar/2)I`.

    Args:
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianState: the vacuum state
    """
    basis = QuadPairBasis(1) if basis is None else basis
    dim = 2 * basis.nmodes
    return GaussianState(np.zeros(dim), (hbar / 2) * np.identity(dim), basis=basis, hbar=hbar)


def thermalstate(nbar, basis=None, hbar=2.0):
    r"""Thermal state with mean photon number ``nbar``,
    :math:`\mathbf{V}=(2\bar{n}+1)(\hbar/2)I`.

    Args:
        nbar (float or Sequence[float]): mean photon number of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianState: the thermal state
    """
    basis = QuadPairBasis(1) if basis is None else basis
    nbars = _per_block(nbar, basis.nmodes, "nbar")

    means = [np.zeros(2) for _ in nbars]
    covs = [(2 * n + 1) * (hbar / 2) * np.identity(2) for n in nbars]
    return _assemble(GaussianState, means, [covs], basis, hbar)


def coherentstate(alpha, basis=None, hbar=2.0):
    r"""Coherent state :math:`\ket{\alpha}`, with
    :math:`\bar{\mathbf{r}}=\sqrt{2\hbar}(\mathrm{Re}(\alpha),\mathrm{Im}(\alpha))`
    and :math:`\mathbf{V}=(\hbar/2)I`.

    Args:
        alpha (complex or Sequence[complex]): displacement of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianState: the coherent state
    """
    basis = QuadPairBasis(1) if basis is None else basis
    alphas = _per_block(alpha, basis.nmodes, "alpha")

    means = [_displacement(a, hbar) for a in alphas]
    covs = [(hbar / 2) * np.identity(2) for _ in alphas]
    return _assemble(GaussianState, means, [covs], basis, hbar)


def squeezedstate(r, theta, basis=None, hbar=2.0):
    r"""Squeezed vacuum state with squeezing :math:`z=re^{i\theta}`.

    For :math:`\theta=0` the covariance matrix is
    :math:`(\hbar/2)\,\mathrm{diag}(e^{-2r},e^{2r})`.

    Args:
        r (float or Sequence[float]): squeezing magnitude of each mode
        theta (float or Sequence[float]): squeezing phase of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianState: the squeezed state
    """
    basis = QuadPairBasis(1) if basis is None else basis
    rs = _per_block(r, basis.nmodes, "r")
    thetas = _per_block(theta, basis.nmodes, "theta")

    means, covs = [], []
    for ri, ti in zip(rs, thetas):
        S = squeezing(ri, ti)
        means.append(np.zeros(2))
        covs.append((hbar / 2) * S @ S.T)

    return _assemble(GaussianState, means, [covs], basis, hbar)


def eprstate(r, theta, basis=None, hbar=2.0):
    r"""Two-mode squeezed vacuum (EPR) state, obtained by applying
    :func:`twosqueeze` to the vacuum.

    Args:
        r (float or Sequence[float]): squeezing magnitude of each pair of modes
        theta (float or Sequence[float]): squeezing phase of each pair of modes
        basis (Basis): quadrature basis with an even number of modes, two by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianState: the EPR state
    """
    basis = QuadPairBasis(2) if basis is None else basis
    count = _pairs(basis)
    rs = _per_block(r, count, "r")
    thetas = _per_block(theta, count, "theta")

    means, covs = [], []
    for ri, ti in zip(rs, thetas):
        S = xxpp_to_xpxp(two_mode_squeezing(ri, ti))
        means.append(np.zeros(4))
        covs.append((hbar / 2) * S @ S.T)

    return _assemble(GaussianState, means, [covs], basis, hbar)


# ------------------------------------------------------------------------
# Unitaries                                                             |
# ------------------------------------------------------------------------


def displace(alpha, basis=None, hbar=2.0):
    r"""Displacement :math:`D(\alpha)`.

    Args:
        alpha (complex or Sequence[complex]): displacement of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianUnitary: the displacement
    """
    basis = QuadPairBasis(1) if basis is None else basis
    alphas = _per_block(alpha, basis.nmodes, "alpha")

    disps = [_displacement(a, hbar) for a in alphas]
    symps = [np.identity(2) for _ in alphas]
    return _assemble(GaussianUnitary, disps, [symps], basis, hbar)


def phaseshift(theta, basis=None, hbar=2.0):
    r"""Phase space rotation :math:`R(\theta)=e^{i\theta\ad\a}`.

    Args:
        theta (float or Sequence[float]): rotation angle of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianUnitary: the phase shift
    """
    basis = QuadPairBasis(1) if basis is None else basis
    thetas = _per_block(theta, basis.nmodes, "theta")

    disps = [np.zeros(2) for _ in thetas]
    symps = [rotation(t) for t in thetas]
    return _assemble(GaussianUnitary, disps, [symps], basis, hbar)


def squeeze(r, theta, basis=None, hbar=2.0):
    r"""Single mode squeezing :math:`S(z)` with :math:`z=re^{i\theta}`.

    Args:
        r (float or Sequence[float]): squeezing magnitude of each mode
        theta (float or Sequence[float]): squeezing phase of each mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianUnitary: the squeezing operation
    """
    basis = QuadPairBasis(1) if basis is None else basis
    rs = _per_block(r, basis.nmodes, "r")
    thetas = _per_block(theta, basis.nmodes, "theta")

    disps = [np.zeros(2) for _ in rs]
    symps = [squeezing(ri, ti) for ri, ti in zip(rs, thetas)]
    return _assemble(GaussianUnitary, disps, [symps], basis, hbar)


def twosqueeze(r, theta, basis=None, hbar=2.0):
    r"""Two-mode squeezing :math:`S_2(z)` with :math:`z=re^{i\theta}`, acting
    on the pairs of modes :math:`(1,2), (3,4), \dots`

    Args:
        r (float or Sequence[float]): squeezing magnitude of each pair of modes
        theta (float or Sequence[float]): squeezing phase of each pair of modes
        basis (Basis): quadrature basis with an even number of modes, two by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianUnitary: the two-mode squeezing operation
    """
    basis = QuadPairBasis(2) if basis is None else basis
    count = _pairs(basis)
    rs = _per_block(r, count, "r")
    thetas = _per_block(theta, count, "theta")

    disps = [np.zeros(4) for _ in rs]
    symps = [xxpp_to_xpxp(two_mode_squeezing(ri, ti)) for ri, ti in zip(rs, thetas)]
    return _assemble(GaussianUnitary, disps, [symps], basis, hbar)


def beamsplitter(theta, phi=0.0, basis=None, hbar=2.0):
    r"""Beamsplitter with transmission amplitude :math:`\cos\theta` and phase
    :math:`\phi`, acting on the pairs of modes :math:`(1,2), (3,4), \dots`

    Args:
        theta (float or Sequence[float]): transmission angle of each pair of modes
        phi (float or Sequence[float]): phase angle of each pair of modes
        basis (Basis): quadrature basis with an even number of modes, two by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianUnitary: the beamsplitter
    """
    basis = QuadPairBasis(2) if basis is None else basis
    count = _pairs(basis)
    thetas = _per_block(theta, count, "theta")
    phis = _per_block(phi, count, "phi")

    disps = [np.zeros(4) for _ in thetas]
    symps = [xxpp_to_xpxp(beam_splitter(t, p)) for t, p in zip(thetas, phis)]
    return _assemble(GaussianUnitary, disps, [symps], basis, hbar)


# ------------------------------------------------------------------------
# Channels                                                              |
# ------------------------------------------------------------------------


def attenuator(theta, nbar, basis=None, hbar=2.0):
    r"""Thermal attenuator: a beamsplitter of transmission amplitude
    :math:`\cos\theta` mixing each mode with a thermal environment of mean
    photon number ``nbar``.

    .. math:: T = \cos\theta\, I, \qquad N = \sin^2\theta\,(2\bar{n}+1)(\hbar/2) I.

    Args:
        theta (float or Sequence[float]): attenuation angle of each mode
        nbar (float or Sequence[float]): thermal photon number of each environment mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianChannel: the attenuator
    """
    basis = QuadPairBasis(1) if basis is None else basis
    thetas = _per_block(theta, basis.nmodes, "theta")
    nbars = _per_block(nbar, basis.nmodes, "nbar")

    disps = [np.zeros(2) for _ in thetas]
    transforms = [np.cos(t) * np.identity(2) for t in thetas]
    noises = [
        np.sin(t) ** 2 * (2 * n + 1) * (hbar / 2) * np.identity(2) for t, n in zip(thetas, nbars)
    ]
    return _assemble(GaussianChannel, disps, [transforms, noises], basis, hbar)


def amplifier(r, nbar, basis=None, hbar=2.0):
    r"""Phase insensitive amplifier: two-mode squeezing of each mode with a
    thermal environment of mean photon number ``nbar``.

    .. math:: T = \cosh r\, I, \qquad N = \sinh^2 r\,(2\bar{n}+1)(\hbar/2) I.

    Args:
        r (float or Sequence[float]): amplification squeezing of each mode
        nbar (float or Sequence[float]): thermal photon number of each environment mode
        basis (Basis): quadrature basis, one mode by default
        hbar (float): the value of :math:`\hbar`

    Returns:
        GaussianChannel: the amplifier
    """
    basis = QuadPairBasis(1) if basis is None else basis
    rs = _per_block(r, basis.nmodes, "r")
    nbars = _per_block(nbar, basis.nmodes, "nbar")

    disps = [np.zeros(2) for _ in rs]
    transforms = [np.cosh(ri) * np.identity(2) for ri in rs]
    noises = [
        np.sinh(ri) ** 2 * (2 * n + 1) * (hbar / 2) * np.identity(2) for ri, n in zip(rs, nbars)
    ]
    return _assemble(GaussianChannel, disps, [transforms, noises], basis, hbar)
