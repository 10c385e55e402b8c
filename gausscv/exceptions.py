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
Exceptions raised by the phase space entities, the composition and action
engines and the entanglement and information measures.
"""


class DimensionMismatch(ValueError):
    """Raised when the vectors and matrices describing a Gaussian object,
    or a state and the operation acting on it, have incompatible sizes."""


class BasisMismatch(ValueError):
    """Raised when two Gaussian objects are expressed in different quadrature
    bases or with different values of :math:`\\hbar`."""


class ModeIndexError(IndexError):
    """Raised when a mode index is outside of :math:`[1, N]` or repeated."""


STATE_ERROR = (
    "The mean vector of a Gaussian state must have length 2N and its covariance "
    "matrix must be of size 2N x 2N."
)
UNITARY_ERROR = (
    "The displacement vector of a Gaussian unitary must have length 2N and its "
    "symplectic matrix must be of size 2N x 2N."
)
CHANNEL_ERROR = (
    "The displacement vector of a Gaussian channel must have length 2N and its "
    "transform and noise matrices must be of size 2N x 2N."
)
ACTION_ERROR = "The Gaussian operation and the state it acts on must have the same number of modes."
BASIS_ERROR = "The number of modes of the basis does not match the size of the given arrays."
SYMPLECTIC_ERROR = "Both objects must be expressed in the same symplectic basis."
HBAR_ERROR = "Both objects must be defined with the same value of hbar."
INDEX_ERROR = "Mode indices must be distinct integers between 1 and the number of modes."
