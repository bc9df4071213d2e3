"""Common Pydantic schemas shared across requests and responses."""

from pydantic import BaseModel, Field


class GridConfigSchema(BaseModel):
    """A cabinet grid layout and its physical size in millimeters."""

    columns: int = Field(..., ge=1, description="Cabinet columns")
    rows: int = Field(..., ge=1, description="Cabinet rows")
    total_cabinets: int = Field(..., ge=1, description="Columns x rows")
    width_mm: float = Field(..., description="Wall width in mm")
    height_mm: float = Field(..., description="Wall height in mm")
    diagonal_mm: float = Field(..., description="Wall diagonal in mm")
    aspect_ratio: float = Field(..., description="Width / height")


class CabinetSchema(BaseModel):
    """A cabinet module in the catalog."""

    cabinet_type: str = Field(..., description="Catalog key")
    width_mm: float = Field(..., description="Module width in mm")
    height_mm: float = Field(..., description="Module height in mm")
    aspect_ratio: float = Field(..., description="Module width / height")


class AspectRatioPresetSchema(BaseModel):
    """Named aspect ratio shortcut."""

    label: str = Field(..., description="Display label, e.g. 16:9")
    value: float = Field(..., description="Width / height")
