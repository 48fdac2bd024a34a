"""
Unit tests for the EC2 characteristic strain states.
"""

import pytest

from nmdiagram.core import StrainState, SectionGeometry
from nmdiagram.design import CHARACTERISTIC_LABELS, characteristic_states, integrate_concrete


def layer_strains(state, geometry):
    strain = StrainState(state.eps_top, state.eps_bottom, geometry.h)
    return strain.at_norm(geometry.y1_norm), strain.at_norm(geometry.y2_norm)


class TestCharacteristicStates:
    """Test the nine boundary states of the diagram."""

    def test_labels_and_order(self, geometry, concrete, steel):
        """Nine states from pure compression to pure tension."""
        states = characteristic_states(geometry, concrete, steel)

        assert [s.label for s in states] == list(CHARACTERISTIC_LABELS)
        assert [s.label for s in states] == ["1", "2", "2b", "3", "4", "5", "6", "7", "8"]

    def test_compression_states(self, geometry, concrete, steel):
        """States 1, 2 and 2b keep εcu at the top fibre."""
        s1, s2, s2b = characteristic_states(geometry, concrete, steel)[:3]

        assert (s1.eps_top, s1.eps_bottom) == (concrete.eps_cu, concrete.eps_cu)
        assert (s2.eps_top, s2.eps_bottom) == (concrete.eps_cu, concrete.eps_c2)
        assert (s2b.eps_top, s2b.eps_bottom) == (concrete.eps_cu, 0.0)

    def test_bottom_layer_yield_and_ultimate(self, geometry, concrete, steel):
        """State 3 yields the bottom layer, states 4 to 6 take it to εud."""
        states = {s.label: s for s in characteristic_states(geometry, concrete, steel)}

        assert layer_strains(states["3"], geometry)[1] == pytest.approx(steel.eps_yd)
        for label in ("4", "5", "6"):
            assert layer_strains(states[label], geometry)[1] == pytest.approx(steel.eps_ud)

        assert states["3"].eps_top == concrete.eps_cu
        assert states["4"].eps_top == concrete.eps_cu
        assert states["5"].eps_top == concrete.eps_c2
        assert states["6"].eps_top == 0.0

    def test_bottom_strain_value_state_3(self, geometry, concrete, steel):
        """eps_bottom = (εyd − εcu·y2n)/(1 − y2n)."""
        state = characteristic_states(geometry, concrete, steel)[3]
        assert state.eps_bottom == pytest.approx((0.002175 + 0.0035 * 0.1) / 0.9)

    def test_state_7_layer_strains(self, geometry, concrete, steel):
        """State 7: top layer at εyd, bottom layer at εud."""
        state = characteristic_states(geometry, concrete, steel)[7]
        eps_s1, eps_s2 = layer_strains(state, geometry)

        assert eps_s1 == pytest.approx(steel.eps_yd)
        assert eps_s2 == pytest.approx(steel.eps_ud)

    def test_pure_tension(self, geometry, concrete, steel):
        """State 8: uniform εud."""
        state = characteristic_states(geometry, concrete, steel)[-1]
        assert (state.eps_top, state.eps_bottom) == (steel.eps_ud, steel.eps_ud)

    def test_asymmetric_layers(self, concrete, steel):
        """Layer inversions hold for unequal covers."""
        geometry = SectionGeometry(b=0.25, h=0.6, layer1_distance=0.04, layer2_y=0.07)
        states = {s.label: s for s in characteristic_states(geometry, concrete, steel)}

        assert layer_strains(states["4"], geometry)[1] == pytest.approx(steel.eps_ud)
        eps_s1, eps_s2 = layer_strains(states["7"], geometry)
        assert eps_s1 == pytest.approx(steel.eps_yd)
        assert eps_s2 == pytest.approx(steel.eps_ud)

    def test_concrete_compression_decreases(self, geometry, concrete, steel):
        """Concrete compression does not grow from state 1 to state 8."""
        magnitudes = []
        for state in characteristic_states(geometry, concrete, steel):
            forces = integrate_concrete(
                geometry, concrete, StrainState(state.eps_top, state.eps_bottom, geometry.h)
            )
            magnitudes.append(abs(forces.n))

        for earlier, later in zip(magnitudes[:-1], magnitudes[1:]):
            assert later <= earlier + 1e-6
        assert magnitudes[0] == pytest.approx(3.0e6)
        assert magnitudes[-1] == 0.0
