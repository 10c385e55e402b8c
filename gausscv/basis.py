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
Quadrature bases of an :math:`N` mode phase space.

Two orderings of the :math:`2N` quadrature operators are supported:

* :class:`QuadPairBasis`, the interleaved ordering
  :math:`(q_1,p_1,q_2,p_2,\dots,q_N,p_N)`, and
* :class:`QuadBlockBasis`, the block ordering
  :math:`(q_1,\dots,q_N,p_1,\dots,p_N)`.

A basis only carries the number of modes. Everything that depends on the
ordering (the symplectic form and the rows occupied by a given mode) is
looked up through one small function per basis.
"""
import numbers

import numpy as np
from thewalrus.symplectic import sympmat, xxpp_to_xpxp

from .exceptions import BasisMismatch, DimensionMismatch, ModeIndexError, BASIS_ERROR, INDEX_ERROR


class Basis:
    """Base class for the quadrature orderings.

    Args:
        nmodes (int): number of modes
    """

    __slots__ = ("_nmodes",)

    def __init__(self, nmodes):
        if isinstance(nmodes, bool) or not isinstance(nmodes, numbers.Integral):
            raise ValueError("Number of modes must be an integer")

        if nmodes < 1:
            raise ValueError("Number of modes must be positive")

        self._nmodes = int(nmodes)

    @property
    def nmodes(self):
        """int: number of modes"""
        return self._nmodes

    def __eq__(self, other):
        return type(self) is type(other) and self._nmodes == other.nmodes

    def __hash__(self):
        return hash((type(self).__name__, self._nmodes))

    def __add__(self, other):
        if type(self) is not type(other):
            raise BasisMismatch(
                "Cannot combine a {} with a {}".format(type(self).__name__, type(other).__name__)
            )
        return type(self)(self._nmodes + other.nmodes)

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self._nmodes)


class QuadPairBasis(Basis):
    r"""Interleaved ordering :math:`(q_1,p_1,\dots,q_N,p_N)`."""

    __slots__ = ()


class QuadBlockBasis(Basis):
    r"""Block ordering :math:`(q_1,\dots,q_N,p_1,\dots,p_N)`."""

    __slots__ = ()


def _pair_rows(nmodes, mode):
    return 2 * (mode - 1), 2 * (mode - 1) + 1


def _block_rows(nmodes, mode):
    return mode - 1, nmodes + mode - 1


def _pair_form(nmodes):
    return xxpp_to_xpxp(sympmat(nmodes))


def _block_form(nmodes):
    return sympmat(nmodes)


_QUADRATURE_ROWS = {QuadPairBasis: _pair_rows, QuadBlockBasis: _block_rows}
_SYMPLECTIC_FORMS = {QuadPairBasis: _pair_form, QuadBlockBasis: _block_form}


def nmodes(basis):
    """Number of modes described by a basis.

    Args:
        basis (Basis): the quadrature basis

    Returns:
        int: number of modes
    """
    return basis.nmodes


def symplecticform(basis):
    r"""The symplectic form :math:`\Omega` of a basis.

    For the block ordering this is

    .. math:: \Omega = \begin{bmatrix}0&I\\-I&0\end{bmatrix},

    and for the interleaved ordering it is the direct sum of one
    :math:`\begin{bmatrix}0&1\\-1&0\end{bmatrix}` block per mode.

    Args:
        basis (Basis): the quadrature basis

    Returns:
        array: :math:`2N\times 2N` symplectic form
    """
    return _SYMPLECTIC_FORMS[type(basis)](basis.nmodes)


def quadrature_indices(basis, mode):
    """Rows of the phase space vector occupied by the position and momentum
    quadratures of a mode.

    Args:
        basis (Basis): the quadrature basis
        mode (int): mode index, counting from 1

    Returns:
        tuple[int, int]: zero-based rows of the position and momentum quadrature
    """
    return _QUADRATURE_ROWS[type(basis)](basis.nmodes, mode)


def mode_rows(basis, modes):
    """Rows occupied by a sequence of modes, laid out in the ordering of the basis.

    Taking the rows and columns returned here from a vector of means or
    a covariance matrix gives the same quantity for the subsystem of ``modes``,
    expressed in the same kind of basis.

    Args:
        basis (Basis): the quadrature basis
        modes (Sequence[int]): mode indices, counting from 1

    Returns:
        array[int]: zero-based rows
    """
    q_rows, p_rows = zip(*[quadrature_indices(basis, mode) for mode in modes])

    if isinstance(basis, QuadBlockBasis):
        return np.array(q_rows + p_rows, dtype=int)

    return np.array([row for pair in zip(q_rows, p_rows) for row in pair], dtype=int)


def validate_modes(indices, num_modes):
    """Checks a mode index or a collection of mode indices.

    Args:
        indices (int or Iterable[int]): mode indices, counting from 1
        num_modes (int): number of modes of the system

    Returns:
        list[int]: the indices in ascending order

    Raises:
        ModeIndexError: if an index is outside of ``[1, num_modes]``, if an
            index is repeated or if no index was given
    """
    if isinstance(indices, numbers.Integral):
        indices = [indices]

    modes = list(indices)

    for mode in modes:
        if isinstance(mode, bool) or not isinstance(mode, numbers.Integral):
            raise ModeIndexError(INDEX_ERROR)

        if mode < 1 or mode > num_modes:
            raise ModeIndexError(INDEX_ERROR)

    if not modes or len(set(modes)) != len(modes):
        raise ModeIndexError(INDEX_ERROR)

    return sorted(int(mode) for mode in modes)


def basis_for(dim, basis=None):
    """Returns the basis of a phase space of dimension ``dim``.

    Args:
        dim (int): dimension of the phase space
        basis (Basis or None): the requested basis. If ``None``, the
            interleaved basis is used.

    Returns:
        Basis: a basis describing ``dim // 2`` modes

    Raises:
        DimensionMismatch: if ``dim`` is odd or zero, or does not agree with
            the number of modes of ``basis``
    """
    if dim == 0 or dim % 2 != 0:
        raise DimensionMismatch("The phase space dimension must be a positive even number.")

    if basis is None:
        return QuadPairBasis(dim // 2)

    if not isinstance(basis, Basis):
        raise TypeError("Expected a QuadPairBasis or QuadBlockBasis, received {}".format(basis))

    if 2 * basis.nmodes != dim:
        raise DimensionMismatch(BASIS_ERROR)

    return basis
