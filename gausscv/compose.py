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
Structural transformations of Gaussian objects: direct sums of independent
subsystems and changes of quadrature basis.

The direct sum of an :math:`N_1` mode object :math:`a` and an :math:`N_2` mode
object :math:`b` describes both subsystems side by side, modes
:math:`1,\dots,N_1` coming from :math:`a` and modes
:math:`N_1+1,\dots,N_1+N_2` from :math:`b`. In the interleaved basis the
vectors are concatenated and the matrices placed block diagonally,

.. math:: \mathbf{V}_{a\oplus b} = \begin{bmatrix}\mathbf{V}_a&0\\0&\mathbf{V}_b\end{bmatrix}.

In the block basis the result keeps the block ordering, so the positions of
:math:`a` and :math:`b` come first, followed by their momenta.
"""
from functools import reduce

import numpy as np
from thewalrus.symplectic import xpxp_to_xxpp, xxpp_to_xpxp

from .basis import QuadBlockBasis, QuadPairBasis, mode_rows
from .exceptions import BasisMismatch, DimensionMismatch, BASIS_ERROR, HBAR_ERROR
from .operators import GaussianChannel, GaussianUnitary
from .states import GaussianState, _convert

GAUSSIAN_TYPES = (GaussianState, GaussianUnitary, GaussianChannel)


def _embed(x, y, rows_x, rows_y, dim):
    """Places ``x`` on ``rows_x`` and ``y`` on ``rows_y`` of a zero array of
    dimension ``dim``. Matrices are embedded along both axes."""
    dtype = np.result_type(x, y)

    if x.ndim == 1:
        out = np.zeros(dim, dtype=dtype)
        out[rows_x] = x
        out[rows_y] = y
        return out

    out = np.zeros((dim, dim), dtype=dtype)
    out[rows_x.reshape(-1, 1), rows_x.reshape(1, -1)] = x
    out[rows_y.reshape(-1, 1), rows_y.reshape(1, -1)] = y
    return out


def _directsum(a, b, vec_type=None, mat_type=None):
    if not isinstance(a, GAUSSIAN_TYPES) or type(a) is not type(b):
        raise TypeError(
            "The direct sum is defined between two GaussianState, two GaussianUnitary "
            "or two GaussianChannel objects, received {} and {}".format(
                type(a).__name__, type(b).__name__
            )
        )

    if a.hbar != b.hbar:
        raise BasisMismatch(HBAR_ERROR)

    basis = a.basis + b.basis
    total = basis.nmodes
    rows_a = mode_rows(basis, range(1, a.nmodes + 1))
    rows_b = mode_rows(basis, range(a.nmodes + 1, total + 1))

    fields = []
    for name in a._fields:
        x, y = getattr(a, name), getattr(b, name)
        out = _embed(x, y, rows_a, rows_b, 2 * total)
        fields.append(_convert(out, vec_type if out.ndim == 1 else mat_type))

    return type(a)(*fields, basis=basis, hbar=a.hbar)


def directsum(*objs, vec_type=None, mat_type=None):
    """Direct sum of Gaussian states, unitaries or channels.

    With more than two arguments the sum is taken from left to right, so
    ``directsum(a, b, c) == directsum(directsum(a, b), c)``.

    **Example:**

    >>> vac = vacuumstate()
    >>> state = directsum(vac, vac)
    >>> state.covar
    array([[1., 0., 0., 0.],
           [0., 1., 0., 0.],
           [0., 0., 1., 0.],
           [0., 0., 0., 1.]])

    Args:
        *objs (GaussianState or GaussianUnitary or GaussianChannel): at least
            two objects of the same kind, basis type and hbar

    Keyword Args:
        vec_type (callable): optional container type applied to the vector of the result
        mat_type (callable): optional container type applied to the matrices of the result

    Returns:
        GaussianState or GaussianUnitary or GaussianChannel: the joint object

    Raises:
        TypeError: if the objects are not all of the same kind
        BasisMismatch: if the objects use different kinds of basis or values of hbar
    """
    if len(objs) < 2:
        raise TypeError("directsum requires at least two arguments")

    head = reduce(_directsum, objs[:-1])
    return _directsum(head, objs[-1], vec_type=vec_type, mat_type=mat_type)


def changebasis(obj, basis):
    """Expresses a Gaussian state, unitary or channel in another quadrature basis.

    Args:
        obj (GaussianState or GaussianUnitary or GaussianChannel): the object to convert
        basis (Basis): the target basis, with the same number of modes as ``obj``

    Returns:
        GaussianState or GaussianUnitary or GaussianChannel: a new object
        of the same kind, expressed in ``basis``

    Raises:
        TypeError: if ``basis`` is not a quadrature basis
        DimensionMismatch: if ``basis`` has a different number of modes
    """
    if not isinstance(basis, (QuadPairBasis, QuadBlockBasis)):
        raise TypeError("Expected a QuadPairBasis or QuadBlockBasis, received {}".format(basis))

    if basis.nmodes != obj.nmodes:
        raise DimensionMismatch(BASIS_ERROR)

    if type(obj.basis) is type(basis):
        permute = np.copy
    elif isinstance(basis, QuadBlockBasis):
        permute = xpxp_to_xxpp
    else:
        permute = xxpp_to_xpxp

    fields = [permute(getattr(obj, name)) for name in obj._fields]
    return type(obj)(*fields, basis=basis, hbar=obj.hbar)
