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
Base class shared by the Gaussian states, unitaries and channels.

Every object stores a fixed set of real arrays (its *fields*) together with
the quadrature :class:`~.Basis` they are expressed in and the value of
:math:`\hbar` used in the commutation relation :math:`[\x,\p]=i\hbar`.
"""
import numbers
from copy import deepcopy

import numpy as np

from .basis import basis_for


def as_real_array(x):
    """Converts the input to an array, promoting integer and boolean
    entries to floating point.

    Inexact arrays (including subclasses of :class:`numpy.ndarray`) are
    returned as they are, without copying.
    """
    x = np.asanyarray(x)

    if not np.issubdtype(x.dtype, np.inexact):
        x = x.astype(float)

    return x


class BaseGaussian:
    """Abstract base class for objects described by vectors and matrices over
    a :math:`2N` dimensional phase space.

    Subclasses declare the names of their array attributes in ``_fields``;
    the first field is always the vector.

    Args:
        dim (int): dimension :math:`2N` of the phase space
        basis (Basis): quadrature basis, or ``None`` for the interleaved basis
        hbar (float): the value of :math:`\\hbar`
    """

    _fields = ()

    def __init__(self, dim, basis=None, hbar=2.0):
        if isinstance(hbar, bool) or not isinstance(hbar, numbers.Real) or not hbar > 0:
            raise ValueError("hbar must be a positive real number")

        self.basis = basis_for(dim, basis)
        self.hbar = hbar

    @property
    def nmodes(self):
        """int: number of modes"""
        return self.basis.nmodes

    def __eq__(self, other):
        """Exact equality of all the arrays, the basis and :math:`\\hbar`."""
        if type(self) is not type(other):
            return NotImplemented

        if self.basis != other.basis or self.hbar != other.hbar:
            return False

        return all(
            np.array_equal(getattr(self, name), getattr(other, name)) for name in self._fields
        )

    __hash__ = None

    def copy(self):
        """Returns a copy that shares no arrays with this object."""
        return deepcopy(self)

    def __repr__(self):
        return "<{}: num_modes={}, basis={}, hbar={}>".format(
            type(self).__name__, self.nmodes, type(self.basis).__name__, self.hbar
        )
