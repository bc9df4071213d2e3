"""Unit tests for target dimension derivation.

Tests cover:
- All six supported parameter pairs
- Order independence of the selection
- Infeasible diagonals, unbounded results and degenerate values
- Unit conversion of length inputs
"""

from __future__ import annotations

import pytest

from videowall.domain import ParamKey, ParameterValues, unit_to_mm
from videowall.domain.services import derive_target_dimensions
from videowall.domain.services.target_dimensions import DERIVATIONS, canonical_selection

MM = unit_to_mm("mm")


class TestSupportedPairs:
    """Each supported pair derives width and height in millimeters."""

    def test_ar_height(self) -> None:
        target = derive_target_dimensions(
            ["ar", "height"], ParameterValues(ar=2.0, height=1000), MM
        )
        assert target is not None
        assert target.width_mm == pytest.approx(2000.0)
        assert target.height_mm == pytest.approx(1000.0)

    def test_ar_width(self) -> None:
        target = derive_target_dimensions(
            ["ar", "width"], ParameterValues(ar=2.0, width=2000), MM
        )
        assert target is not None
        assert target.height_mm == pytest.approx(1000.0)

    def test_ar_diagonal(self) -> None:
        """A 4:3 wall with a 5000 mm diagonal is 4000 x 3000."""
        target = derive_target_dimensions(
            ["ar", "diagonal"], ParameterValues(ar=4 / 3, diagonal=5000), MM
        )
        assert target is not None
        assert target.width_mm == pytest.approx(4000.0)
        assert target.height_mm == pytest.approx(3000.0)

    def test_height_width(self) -> None:
        target = derive_target_dimensions(
            ["height", "width"], ParameterValues(height=1800, width=2300), MM
        )
        assert target is not None
        assert (target.width_mm, target.height_mm) == (2300, 1800)

    def test_height_diagonal(self) -> None:
        target = derive_target_dimensions(
            ["height", "diagonal"], ParameterValues(height=3000, diagonal=5000), MM
        )
        assert target is not None
        assert target.width_mm == pytest.approx(4000.0)

    def test_width_diagonal(self) -> None:
        target = derive_target_dimensions(
            ["width", "diagonal"], ParameterValues(width=4000, diagonal=5000), MM
        )
        assert target is not None
        assert target.height_mm == pytest.approx(3000.0)

    def test_table_covers_six_pairs(self) -> None:
        assert len(DERIVATIONS) == 6
        assert all(len(pair) == 2 for pair in DERIVATIONS)


class TestSelectionHandling:
    """Tests for how the parameter selection is interpreted."""

    def test_order_does_not_matter(self) -> None:
        values = ParameterValues(width=3600, height=2025)
        assert derive_target_dimensions(["width", "height"], values, MM) == (
            derive_target_dimensions(["height", "width"], values, MM)
        )

    def test_canonical_selection_accepts_enum_and_names(self) -> None:
        assert canonical_selection([ParamKey.AR, "width"]) == frozenset(
            {ParamKey.AR, ParamKey.WIDTH}
        )

    def test_unknown_key_returns_none(self) -> None:
        assert canonical_selection(["ar", "depth"]) is None
        assert derive_target_dimensions(["ar", "depth"], ParameterValues(ar=1.0), MM) is None

    def test_repeated_key_returns_none(self) -> None:
        assert derive_target_dimensions(["ar", "ar"], ParameterValues(ar=1.0), MM) is None

    def test_missing_value_returns_none(self) -> None:
        assert (
            derive_target_dimensions(["ar", "height"], ParameterValues(ar=1.5), MM) is None
        )

    def test_unselected_values_are_ignored(self) -> None:
        values = ParameterValues(ar=10.0, width=2000, height=1000)
        target = derive_target_dimensions(["width", "height"], values, MM)
        assert target is not None
        assert target.aspect_ratio == pytest.approx(2.0)


class TestInvalidGeometry:
    """Inputs that cannot describe a real wall yield None."""

    def test_diagonal_shorter_than_height(self) -> None:
        values = ParameterValues(height=1000, diagonal=800)
        assert derive_target_dimensions(["height", "diagonal"], values, MM) is None

    def test_diagonal_shorter_than_width(self) -> None:
        values = ParameterValues(width=1000, diagonal=999)
        assert derive_target_dimensions(["width", "diagonal"], values, MM) is None

    def test_zero_aspect_ratio_with_width(self) -> None:
        """Height would be unbounded."""
        values = ParameterValues(ar=0.0, width=1000)
        assert derive_target_dimensions(["ar", "width"], values, MM) is None

    def test_zero_height(self) -> None:
        values = ParameterValues(width=1000, height=0)
        assert derive_target_dimensions(["width", "height"], values, MM) is None

    def test_overflowing_width(self) -> None:
        values = ParameterValues(ar=1e308, height=1e308)
        assert derive_target_dimensions(["ar", "height"], values, MM) is None


class TestDegenerateTargets:
    """Zero widths and negative sizes are passed on unchanged."""

    def test_diagonal_equal_to_height_gives_zero_width(self) -> None:
        values = ParameterValues(height=1000, diagonal=1000)
        target = derive_target_dimensions(["height", "diagonal"], values, MM)
        assert target is not None
        assert target.width_mm == 0.0
        assert target.height_mm == 1000

    def test_zero_aspect_ratio_with_height(self) -> None:
        values = ParameterValues(ar=0.0, height=1000)
        target = derive_target_dimensions(["ar", "height"], values, MM)
        assert target is not None
        assert target.width_mm == 0.0
        assert target.aspect_ratio == 0.0

    def test_negative_length(self) -> None:
        values = ParameterValues(width=-3600, height=2025)
        target = derive_target_dimensions(["width", "height"], values, MM)
        assert target is not None
        assert target.width_mm == -3600


class TestUnits:
    """Length values are converted before derivation."""

    def test_meters(self) -> None:
        target = derive_target_dimensions(
            ["width", "height"], ParameterValues(width=3.6, height=2.025), unit_to_mm("m")
        )
        assert target is not None
        assert target.width_mm == pytest.approx(3600.0)
        assert target.height_mm == pytest.approx(2025.0)

    def test_aspect_ratio_is_not_converted(self) -> None:
        target = derive_target_dimensions(
            ["ar", "height"], ParameterValues(ar=2.0, height=1), unit_to_mm("ft")
        )
        assert target is not None
        assert target.height_mm == pytest.approx(304.8)
        assert target.width_mm == pytest.approx(609.6)
