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
Gaussian states described by their first and second moments.

A state of :math:`N` modes is fully characterized by its vector of means
:math:`\bar{\mathbf{r}}` and its covariance matrix :math:`\mathbf{V}`,

.. math::
    \bar{r}_i = \langle \hat{r}_i \rangle, \qquad
    V_{ij} = \frac{1}{2}\langle \{\hat{r}_i-\bar{r}_i, \hat{r}_j-\bar{r}_j\} \rangle,

where the ordering of :math:`\hat{\mathbf{r}}` is fixed by the state's basis.
With this convention the vacuum has :math:`\mathbf{V} = (\hbar/2) I`.
"""
from .base import BaseGaussian, as_real_array
from .basis import mode_rows, validate_modes
from .exceptions import DimensionMismatch, STATE_ERROR


def _convert(array, container):
    """Applies an optional container type to an output array."""
    if container is None:
        return array

    return container(array)


class GaussianState(BaseGaussian):
    r"""Gaussian state of :math:`N` bosonic modes.

    Args:
        mean (array): length :math:`2N` vector of means
        covar (array): :math:`2N\times 2N` covariance matrix
        basis (Basis): quadrature basis of ``mean`` and ``covar``. Defaults
            to :class:`~.QuadPairBasis`.
        hbar (float): the value of :math:`\hbar` in the commutation
            relation :math:`[\x,\p]=i\hbar`

    Raises:
        DimensionMismatch: if the sizes of ``mean``, ``covar`` and ``basis``
            do not agree
    """

    _fields = ("mean", "covar")

    def __init__(self, mean, covar, basis=None, hbar=2.0):
        mean = as_real_array(mean)
        covar = as_real_array(covar)

        if mean.ndim != 1 or covar.shape != (len(mean), len(mean)):
            raise DimensionMismatch(STATE_ERROR)

        super().__init__(len(mean), basis, hbar)
        self.mean = mean
        self.covar = covar


def ptrace(state, indices, vec_type=None, mat_type=None):
    """Returns the Gaussian state of a subset of the modes of ``state``.

    The modes listed in ``indices`` are the ones that are *kept*: for a
    state built as ``directsum(s1, s2, s3)``, ``ptrace(state, 2)`` returns
    ``s2`` and ``ptrace(state, [3, 1])`` returns ``directsum(s1, s3)``.
    The modes of the returned state are ordered increasingly, whatever the
    order of ``indices``.

    Args:
        state (GaussianState): the composite state
        indices (int or Sequence[int]): modes to keep, counting from 1
        vec_type (callable): optional container type applied to the vector
            of means of the result
        mat_type (callable): optional container type applied to the covariance
            matrix of the result

    Returns:
        GaussianState: the state of the requested modes, in the same kind of
        basis and with the same :math:`\\hbar`

    Raises:
        ModeIndexError: if an index is outside of ``[1, state.nmodes]`` or repeated
    """
    modes = validate_modes(indices, state.nmodes)
    rows = mode_rows(state.basis, modes)

    mean = state.mean[rows]
    covar = state.covar[rows.reshape(-1, 1), rows.reshape(1, -1)]

    return GaussianState(
        _convert(mean, vec_type),
        _convert(covar, mat_type),
        basis=type(state.basis)(len(modes)),
        hbar=state.hbar,
    )
