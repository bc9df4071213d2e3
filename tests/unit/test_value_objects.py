"""Unit tests for domain value objects."""

from __future__ import annotations

import math
from dataclasses import FrozenInstanceError

import pytest

from videowall.domain import (
    ASPECT_RATIO_PRESETS,
    CABINETS,
    CabinetSpec,
    CabinetType,
    CalculatorOutput,
    GridConfig,
    ParamKey,
    ParameterValues,
    TargetDimensions,
)


class TestCatalog:
    """Tests for the cabinet catalog and presets."""

    def test_cabinet_sizes(self) -> None:
        wide = CABINETS[CabinetType.WIDE]
        square = CABINETS[CabinetType.SQUARE]
        assert (wide.width_mm, wide.height_mm) == (600.0, 337.5)
        assert (square.width_mm, square.height_mm) == (500.0, 500.0)

    def test_cabinet_aspect_ratio_matches_size(self) -> None:
        """Catalog aspect ratios agree with the module dimensions."""
        for spec in CABINETS.values():
            assert spec.aspect_ratio == pytest.approx(spec.width_mm / spec.height_mm)

    def test_cabinet_type_lookup_by_key(self) -> None:
        assert CabinetType("16:9") is CabinetType.WIDE
        assert CabinetType("1:1") is CabinetType.SQUARE

    def test_preset_labels(self) -> None:
        labels = [p.label for p in ASPECT_RATIO_PRESETS]
        assert labels == ["16:9", "16:10", "4:3", "1:1", "21:9"]

    def test_non_positive_cabinet_rejected(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            CabinetSpec(width_mm=0, height_mm=500, aspect_ratio=0)


class TestParameterValues:
    """Tests for ParameterValues."""

    def test_get_by_key_or_name(self) -> None:
        values = ParameterValues(ar=1.5, height=1000)
        assert values.get(ParamKey.AR) == 1.5
        assert values.get("height") == 1000
        assert values.get("width") is None

    def test_get_unknown_key_raises(self) -> None:
        with pytest.raises(ValueError):
            ParameterValues().get("depth")

    def test_from_mapping_ignores_unknown_keys(self) -> None:
        values = ParameterValues.from_mapping({"width": 3600, "depth": 10})
        assert values == ParameterValues(width=3600)

    def test_from_pairs_later_pair_wins(self) -> None:
        values = ParameterValues.from_pairs(("width", 1.0), ("width", 2.0))
        assert values.width == 2.0

    def test_is_immutable(self) -> None:
        values = ParameterValues(ar=1.0)
        with pytest.raises(FrozenInstanceError):
            values.ar = 2.0  # type: ignore[misc]


class TestTargetDimensions:
    """Tests for TargetDimensions derived properties."""

    def test_diagonal_and_aspect_ratio(self) -> None:
        target = TargetDimensions(width_mm=4000, height_mm=3000)
        assert target.diagonal_mm == pytest.approx(5000.0)
        assert target.aspect_ratio == pytest.approx(4 / 3)


class TestGridConfig:
    """Tests for GridConfig."""

    def test_from_grid_computes_physical_size(self) -> None:
        cfg = GridConfig.from_grid(6, 6, CABINETS[CabinetType.WIDE])
        assert cfg.columns == 6
        assert cfg.rows == 6
        assert cfg.total_cabinets == 36
        assert cfg.width_mm == 3600.0
        assert cfg.height_mm == 2025.0
        assert cfg.diagonal_mm == pytest.approx(math.hypot(3600, 2025))
        assert cfg.aspect_ratio == pytest.approx(16 / 9)

    def test_grid_key(self) -> None:
        cfg = GridConfig.from_grid(4, 3, CABINETS[CabinetType.SQUARE])
        assert cfg.grid_key == (4, 3)

    def test_zero_rows_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            GridConfig(
                columns=1,
                rows=0,
                total_cabinets=0,
                width_mm=500,
                height_mm=0,
                diagonal_mm=500,
                aspect_ratio=0,
            )

    def test_to_dict_uses_camel_case(self) -> None:
        data = GridConfig.from_grid(2, 1, CABINETS[CabinetType.SQUARE]).to_dict()
        assert data == {
            "columns": 2,
            "rows": 1,
            "totalCabinets": 2,
            "widthMm": 1000.0,
            "heightMm": 500.0,
            "diagonalMm": pytest.approx(math.hypot(1000, 500)),
            "aspectRatio": 2.0,
        }


class TestCalculatorOutput:
    """Tests for CalculatorOutput serialization."""

    def test_to_dict_with_missing_upper(self) -> None:
        lower = GridConfig.from_grid(1, 1, CABINETS[CabinetType.SQUARE])
        output = CalculatorOutput(
            lower=lower,
            upper=None,
            target_width_mm=500.0,
            target_height_mm=500.0,
            target_diagonal_mm=math.hypot(500, 500),
            target_aspect_ratio=1.0,
        )
        data = output.to_dict()
        assert data["lower"]["columns"] == 1
        assert data["upper"] is None
        assert data["targetWidthMm"] == 500.0
        assert data["targetAspectRatio"] == 1.0
