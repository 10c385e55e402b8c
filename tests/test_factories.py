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
r"""Unit tests for the preset states, unitaries and channels"""
import numpy as np
import pytest

from gausscv import (
    GaussianChannel,
    GaussianState,
    GaussianUnitary,
    QuadBlockBasis,
    QuadPairBasis,
    amplifier,
    apply,
    attenuator,
    beamsplitter,
    changebasis,
    coherentstate,
    directsum,
    displace,
    eprstate,
    mean_photon,
    phaseshift,
    squeeze,
    squeezedstate,
    thermalstate,
    twosqueeze,
    vacuumstate,
)
from gausscv.basis import symplecticform

pytestmark = pytest.mark.frontend

ALPHA = 0.4 - 0.3j
R = 0.45
PHI = 0.7


class TestStates:
    """Tests for the preset states"""

    def test_vacuum(self, hbar, basis_type):
        """Test the moments of the multimode vacuum"""
        state = vacuumstate(basis=basis_type(3), hbar=hbar)
        assert isinstance(state, GaussianState)
        assert np.all(state.mean == 0)
        assert np.all(state.covar == hbar / 2 * np.identity(6))
        assert state.basis == basis_type(3)

    def test_default_vacuum(self):
        """Test that the default vacuum has the identity as covariance matrix"""
        state = vacuumstate()
        assert state.basis == QuadPairBasis(1)
        assert np.all(state.covar == np.identity(2))

    def test_coherent(self, hbar, tol):
        """Test that a coherent state is a displaced vacuum"""
        state = coherentstate(ALPHA, hbar=hbar)
        expected = apply(vacuumstate(hbar=hbar), displace(ALPHA, hbar=hbar))

        assert np.allclose(state.mean, np.sqrt(2 * hbar) * np.array([0.4, -0.3]), atol=tol, rtol=0)
        assert np.allclose(state.mean, expected.mean, atol=tol, rtol=0)
        assert np.allclose(state.covar, expected.covar, atol=tol, rtol=0)

    def test_squeezed(self, hbar, basis_type, tol):
        """Test that a squeezed state is a squeezed vacuum"""
        basis = basis_type(1)
        state = squeezedstate(R, PHI, basis=basis, hbar=hbar)
        expected = apply(vacuumstate(basis=basis, hbar=hbar), squeeze(R, PHI, basis=basis, hbar=hbar))
        assert np.allclose(state.covar, expected.covar, atol=tol, rtol=0)

    def test_squeezed_quadratures(self, hbar, tol):
        """Test that the position quadrature is squeezed for a zero phase"""
        state = squeezedstate(R, 0.0, hbar=hbar)
        expected = hbar / 2 * np.diag([np.exp(-2 * R), np.exp(2 * R)])
        assert np.allclose(state.covar, expected, atol=tol, rtol=0)

    def test_epr(self, hbar, basis_type, tol):
        """Test that an EPR state is a two mode squeezed vacuum"""
        basis = basis_type(2)
        state = eprstate(R, PHI, basis=basis, hbar=hbar)
        expected = apply(
            vacuumstate(basis=basis, hbar=hbar), twosqueeze(R, PHI, basis=basis, hbar=hbar)
        )
        assert np.allclose(state.covar, expected.covar, atol=tol, rtol=0)

    def test_broadcast(self, hbar):
        """Test that scalar parameters are used for every mode"""
        state = squeezedstate(R, PHI, basis=QuadPairBasis(3), hbar=hbar)
        single = squeezedstate(R, PHI, hbar=hbar)
        assert state == directsum(single, single, single)

    def test_per_mode_parameters(self, hbar):
        """Test that sequences provide one parameter per mode"""
        state = thermalstate([0.5, 2.0], basis=QuadPairBasis(2), hbar=hbar)
        expected = directsum(thermalstate(0.5, hbar=hbar), thermalstate(2.0, hbar=hbar))
        assert state == expected

    def test_block_basis(self, hbar):
        """Test that the presets are converted to the requested basis"""
        pair = coherentstate([ALPHA, 1j], basis=QuadPairBasis(2), hbar=hbar)
        block = coherentstate([ALPHA, 1j], basis=QuadBlockBasis(2), hbar=hbar)
        assert block == changebasis(pair, QuadBlockBasis(2))

    def test_wrong_number_of_parameters(self):
        """Test that a sequence of the wrong length is rejected"""
        with pytest.raises(ValueError, match="expected 1 or 3"):
            thermalstate([1.0, 2.0], basis=QuadPairBasis(3))

    def test_two_mode_preset_odd_modes(self):
        """Test that two mode presets require an even number of modes"""
        with pytest.raises(ValueError, match="even number of modes"):
            eprstate(R, 0.0, basis=QuadPairBasis(3))


class TestUnitaries:
    """Tests for the preset unitaries"""

    @pytest.mark.parametrize(
        "factory, args",
        [
            (displace, (ALPHA,)),
            (phaseshift, (PHI,)),
            (squeeze, (R, PHI)),
            (twosqueeze, (R, PHI)),
            (beamsplitter, (PHI, R)),
        ],
    )
    def test_symplectic(self, factory, args, basis_type, tol):
        """Test that the preset unitaries are symplectic in both bases"""
        nmodes = 2 if factory in (twosqueeze, beamsplitter) else 1
        basis = basis_type(nmodes)
        unitary = factory(*args, basis=basis)

        S = unitary.symplectic
        omega = symplecticform(basis)

        assert isinstance(unitary, GaussianUnitary)
        assert np.allclose(S @ omega @ S.T, omega, atol=tol, rtol=0)

    def test_phaseshift_coherent(self, hbar, tol):
        """Test that a phase shift rotates the amplitude of a coherent state"""
        theta = 0.6
        state = apply(coherentstate(ALPHA, hbar=hbar), phaseshift(theta, hbar=hbar))
        expected = coherentstate(ALPHA * np.exp(1j * theta), hbar=hbar)
        assert np.allclose(state.mean, expected.mean, atol=tol, rtol=0)
        assert np.allclose(state.covar, expected.covar, atol=tol, rtol=0)

    def test_beamsplitter_photon_number(self, hbar, basis_type, tol):
        """Test that a beamsplitter conserves the total photon number"""
        basis = basis_type(2)
        state = coherentstate([ALPHA, 0.2j], basis=basis, hbar=hbar)
        res = apply(state, beamsplitter(PHI, 0.3, basis=basis, hbar=hbar))
        assert np.allclose(mean_photon(res), mean_photon(state), atol=tol, rtol=0)

    def test_balanced_beamsplitter(self, hbar, tol):
        """Test that a balanced beamsplitter splits a coherent state evenly"""
        state = directsum(coherentstate(1.0, hbar=hbar), vacuumstate(hbar=hbar))
        res = apply(state, beamsplitter(np.pi / 4, 0.0, hbar=hbar))
        n1 = mean_photon(GaussianState(res.mean[:2], res.covar[:2, :2], hbar=hbar))
        n2 = mean_photon(GaussianState(res.mean[2:], res.covar[2:, 2:], hbar=hbar))
        assert np.allclose([n1, n2], [0.5, 0.5], atol=tol, rtol=0)


class TestChannels:
    """Tests for the preset channels"""

    def test_attenuator_arrays(self, hbar):
        """Test the transform and noise matrices of the attenuator"""
        theta, nbar = 0.3, 1.5
        channel = attenuator(theta, nbar, hbar=hbar)

        assert isinstance(channel, GaussianChannel)
        assert np.allclose(channel.transform, np.cos(theta) * np.identity(2))
        assert np.allclose(
            channel.noise, np.sin(theta) ** 2 * (2 * nbar + 1) * hbar / 2 * np.identity(2)
        )

    def test_pure_loss(self, hbar, tol):
        """Test that pure loss maps a coherent state to a weaker coherent state"""
        theta = 0.8
        state = apply(coherentstate(ALPHA, hbar=hbar), attenuator(theta, 0.0, hbar=hbar))
        expected = coherentstate(ALPHA * np.cos(theta), hbar=hbar)
        assert np.allclose(state.mean, expected.mean, atol=tol, rtol=0)
        assert np.allclose(state.covar, expected.covar, atol=tol, rtol=0)

    def test_thermal_loss(self, hbar, tol):
        """Test that complete loss into a thermal environment gives a thermal state"""
        state = apply(vacuumstate(hbar=hbar), attenuator(np.pi / 2, 2.0, hbar=hbar))
        assert np.allclose(state.covar, thermalstate(2.0, hbar=hbar).covar, atol=tol, rtol=0)

    def test_amplifier(self, hbar, basis_type, tol):
        """Test the photon number of the amplified vacuum"""
        r = 0.3
        basis = basis_type(2)
        state = apply(vacuumstate(basis=basis, hbar=hbar), amplifier(r, 0.0, basis=basis, hbar=hbar))
        assert np.allclose(mean_photon(state), 2 * np.sinh(r) ** 2, atol=tol, rtol=0)


class TestMeanPhoton:
    """Tests for the mean photon number"""

    @pytest.mark.parametrize("nbar", [0.0, 0.7, 3.0])
    def test_thermal(self, nbar, hbar, tol):
        """Test the mean photon number of a thermal state"""
        assert np.allclose(mean_photon(thermalstate(nbar, hbar=hbar)), nbar, atol=tol, rtol=0)

    def test_coherent(self, hbar, tol):
        """Test the mean photon number of a coherent state"""
        res = mean_photon(coherentstate(ALPHA, hbar=hbar))
        assert np.allclose(res, np.abs(ALPHA) ** 2, atol=tol, rtol=0)

    def test_squeezed(self, hbar, tol):
        """Test the mean photon number of a squeezed state"""
        res = mean_photon(squeezedstate(R, PHI, hbar=hbar))
        assert np.allclose(res, np.sinh(R) ** 2, atol=tol, rtol=0)

    def test_multimode(self, hbar, basis_type, tol):
        """Test that the mean photon numbers of the modes add up"""
        basis = basis_type(2)
        state = eprstate(R, 0.0, basis=basis, hbar=hbar)
        assert np.allclose(mean_photon(state), 2 * np.sinh(R) ** 2, atol=tol, rtol=0)
