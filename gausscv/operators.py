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
Gaussian unitaries and Gaussian channels, and their action on Gaussian states.

A Gaussian unitary is the affine symplectic map

.. math:: \bar{\mathbf{r}} \mapsto S\bar{\mathbf{r}} + \mathbf{d}, \qquad
          \mathbf{V} \mapsto S \mathbf{V} S^T,

while a Gaussian channel adds noise to the transformed covariance matrix,

.. math:: \bar{\mathbf{r}} \mapsto T\bar{\mathbf{r}} + \mathbf{d}, \qquad
          \mathbf{V} \mapsto T \mathbf{V} T^T + N.

:func:`apply` never modifies its arguments. :func:`apply_inplace` performs the
same update directly in the buffers of the state and is the only function of
the package that mutates a state; the caller must make sure no other object
shares those buffers.
"""
import numpy as np

from .base import BaseGaussian, as_real_array
from .exceptions import (
    BasisMismatch,
    DimensionMismatch,
    ACTION_ERROR,
    CHANNEL_ERROR,
    HBAR_ERROR,
    SYMPLECTIC_ERROR,
    UNITARY_ERROR,
)
from .logger import create_logger
from .states import GaussianState

logger = create_logger(__name__)


def _square(matrix, dim):
    return matrix.ndim == 2 and matrix.shape == (dim, dim)


class GaussianOperation(BaseGaussian):
    """Base class for operations acting on Gaussian states.

    Calling an operation on a state, or multiplying a state by it from the
    left, applies it: ``op * state == op(state) == apply(state, op)``.
    """

    def affine(self):
        """Returns the displacement, the linear transformation and the added
        noise (``None`` for unitaries) of the operation."""
        raise NotImplementedError

    def __mul__(self, other):
        if isinstance(other, GaussianState):
            return apply(other, self)
        return NotImplemented

    def __call__(self, state):
        return apply(state, self)


class GaussianUnitary(GaussianOperation):
    r"""Gaussian unitary operation on :math:`N` modes.

    The symplectic condition :math:`S\Omega S^T = \Omega` is not checked.

    Args:
        disp (array): length :math:`2N` displacement vector
        symplectic (array): :math:`2N\times 2N` symplectic matrix
        basis (Basis): quadrature basis. Defaults to :class:`~.QuadPairBasis`.
        hbar (float): the value of :math:`\hbar`

    Raises:
        DimensionMismatch: if the sizes of ``disp``, ``symplectic`` and ``basis``
            do not agree
    """

    _fields = ("disp", "symplectic")

    def __init__(self, disp, symplectic, basis=None, hbar=2.0):
        disp = as_real_array(disp)
        symplectic = as_real_array(symplectic)

        if disp.ndim != 1 or not _square(symplectic, len(disp)):
            raise DimensionMismatch(UNITARY_ERROR)

        super().__init__(len(disp), basis, hbar)
        self.disp = disp
        self.symplectic = symplectic

    def affine(self):
        return self.disp, self.symplectic, None

    def inv(self):
        r"""The inverse unitary, with symplectic matrix :math:`S^{-1}` and
        displacement :math:`-S^{-1}\mathbf{d}`."""
        symplectic = np.linalg.inv(self.symplectic)
        return GaussianUnitary(-symplectic @ self.disp, symplectic, self.basis, self.hbar)

    def to_channel(self):
        """The noiseless channel implementing this unitary."""
        dim = len(self.disp)
        return GaussianChannel(
            self.disp.copy(), self.symplectic.copy(), np.zeros((dim, dim)), self.basis, self.hbar
        )


class GaussianChannel(GaussianOperation):
    r"""Gaussian channel on :math:`N` modes.

    Args:
        disp (array): length :math:`2N` displacement vector
        transform (array): :math:`2N\times 2N` transformation matrix :math:`T`
        noise (array): :math:`2N\times 2N` noise matrix :math:`N`
        basis (Basis): quadrature basis. Defaults to :class:`~.QuadPairBasis`.
        hbar (float): the value of :math:`\hbar`

    Raises:
        DimensionMismatch: if the sizes of ``disp``, ``transform``, ``noise``
            and ``basis`` do not agree
    """

    _fields = ("disp", "transform", "noise")

    def __init__(self, disp, transform, noise, basis=None, hbar=2.0):
        disp = as_real_array(disp)
        transform = as_real_array(transform)
        noise = as_real_array(noise)

        if disp.ndim != 1 or not (
            _square(transform, len(disp)) and _square(noise, len(disp))
        ):
            raise DimensionMismatch(CHANNEL_ERROR)

        super().__init__(len(disp), basis, hbar)
        self.disp = disp
        self.transform = transform
        self.noise = noise

    def affine(self):
        return self.disp, self.transform, self.noise


def _check_action(state, op):
    if not isinstance(state, GaussianState):
        raise TypeError("Gaussian operations can only be applied to a GaussianState")

    if not isinstance(op, GaussianOperation):
        raise TypeError("Expected a GaussianUnitary or GaussianChannel, received {}".format(op))

    if len(op.disp) != len(state.mean):
        raise DimensionMismatch(ACTION_ERROR)

    if op.basis != state.basis:
        raise BasisMismatch(SYMPLECTIC_ERROR)

    if op.hbar != state.hbar:
        raise BasisMismatch(HBAR_ERROR)

    return op.affine()


def _transformed_moments(state, op):
    disp, transform, noise = _check_action(state, op)

    mean = transform @ state.mean + disp
    covar = transform @ state.covar @ transform.T

    if noise is not None:
        covar = covar + noise

    return mean, covar


def apply(state, op):
    """Applies a Gaussian unitary or channel to a Gaussian state.

    Args:
        state (GaussianState): the input state
        op (GaussianUnitary or GaussianChannel): the operation

    Returns:
        GaussianState: the output state. ``state`` is left unchanged.

    Raises:
        DimensionMismatch: if ``op`` and ``state`` have different numbers of modes
        BasisMismatch: if ``op`` and ``state`` use different bases or values of hbar
    """
    mean, covar = _transformed_moments(state, op)
    return GaussianState(mean, covar, basis=state.basis, hbar=state.hbar)


def apply_inplace(state, op):
    """Applies a Gaussian unitary or channel to a Gaussian state, overwriting
    the vector of means and the covariance matrix of ``state``.

    The arithmetic is the same as in :func:`apply`. Any other object sharing
    the buffers of ``state.mean`` or ``state.covar`` sees the update as well,
    so the caller needs exclusive access to the state.

    Args:
        state (GaussianState): the state to update
        op (GaussianUnitary or GaussianChannel): the operation

    Returns:
        GaussianState: ``state`` itself, after the update

    Raises:
        DimensionMismatch: if ``op`` and ``state`` have different numbers of modes
        BasisMismatch: if ``op`` and ``state`` use different bases or values of hbar
    """
    mean, covar = _transformed_moments(state, op)

    np.copyto(state.mean, mean, casting="same_kind")
    np.copyto(state.covar, covar, casting="same_kind")

    logger.debug("Applied %s in place to %s", op, state)
    return state
