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
GaussCV represents Gaussian states, unitaries and channels of continuous
variable systems through their first and second moments, and computes
information and entanglement measures of Gaussian states.

The package is organised as follows:

* :mod:`gausscv.basis`: quadrature orderings and symplectic forms
* :mod:`gausscv.states` and :mod:`gausscv.operators`: the Gaussian objects,
  partial traces and the action of operations on states
* :mod:`gausscv.compose`: direct sums and changes of basis
* :mod:`gausscv.measures`: purity, entropy, fidelity and logarithmic negativity
* :mod:`gausscv.factories`: frequently used states, unitaries and channels
* :mod:`gausscv.utils`: random interferometers, symplectic and covariance matrices
* :mod:`gausscv.configuration` and :mod:`gausscv.logger`: configuration files
  and package logging
"""
from ._version import __version__
from .basis import QuadBlockBasis, QuadPairBasis, nmodes, symplecticform
from .compose import changebasis, directsum
from .exceptions import BasisMismatch, DimensionMismatch, ModeIndexError
from .factories import (
    amplifier,
    attenuator,
    beamsplitter,
    coherentstate,
    displace,
    eprstate,
    phaseshift,
    squeeze,
    squeezedstate,
    thermalstate,
    twosqueeze,
    vacuumstate,
)
from .measures import (
    entropy_vn,
    fidelity,
    is_physical,
    logarithmic_negativity,
    mean_photon,
    purity,
    sympspectrum,
)
from .operators import GaussianChannel, GaussianUnitary, apply, apply_inplace
from .states import GaussianState, ptrace

__all__ = [
    "QuadPairBasis",
    "QuadBlockBasis",
    "nmodes",
    "symplecticform",
    "GaussianState",
    "GaussianUnitary",
    "GaussianChannel",
    "DimensionMismatch",
    "BasisMismatch",
    "ModeIndexError",
    "directsum",
    "changebasis",
    "ptrace",
    "apply",
    "apply_inplace",
    "purity",
    "entropy_vn",
    "fidelity",
    "logarithmic_negativity",
    "sympspectrum",
    "is_physical",
    "mean_photon",
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
    "version",
    "about",
]


def version():
    r"""
    Version number of GaussCV.

    Returns:
      str: package version number
    """
    return __version__


def about():
    """GaussCV information.

    Prints the installed version numbers for GaussCV and its dependencies,
    and some system info. Please include this information in bug reports.
    """
    # pylint: disable=import-outside-toplevel
    import sys
    import platform
    import os
    import numpy
    import scipy
    import thewalrus

    print("\nGaussCV: Gaussian states, unitaries and channels in phase space.")
    print("Copyright 2024 Xanadu Quantum Technologies Inc.\n")

    print("Python version:            {}.{}.{}".format(*sys.version_info[0:3]))
    print("Platform info:             {}".format(platform.platform()))
    print("Installation path:         {}".format(os.path.dirname(__file__)))
    print("GaussCV version:           {}".format(__version__))
    print("Numpy version:             {}".format(numpy.__version__))
    print("Scipy version:             {}".format(scipy.__version__))
    print("The Walrus version:        {}".format(thewalrus.__version__))
