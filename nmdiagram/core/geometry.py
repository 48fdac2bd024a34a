"""
Cross-section geometry for two-layer rectangular RC sections.

Coordinates:
    - Absolute y is measured upward from the bottom edge (0 ≤ y ≤ h).
    - Normalized y is y / h (0 = bottom fibre, 1 = top fibre).
    - Local y is measured upward from the section centroid (−h/2 ≤ y ≤ h/2).

Layer 1 is the top reinforcement, layer 2 the bottom reinforcement.

Units: SI (m)

Examples:
    >>> section = SectionGeometry(b=0.3, h=0.5, layer1_distance=0.05, layer2_y=0.05)
    >>> section.y1, section.y2
    (0.45, 0.05)
"""

from pydantic import BaseModel, Field, model_validator


class SectionGeometry(BaseModel):
    """
    Rectangular section with one reinforcement layer near each face.

    Attributes:
        b: Section width (m)
        h: Section height (m)
        layer1_distance: Distance of the top layer from the top edge (m)
        layer2_y: Absolute position of the bottom layer above the bottom edge (m)
    """

    b: float = Field(default=0.3, gt=0, description="Section width (m)")
    h: float = Field(default=0.5, gt=0, description="Section height (m)")
    layer1_distance: float = Field(
        default=0.05, description="Top layer distance from the top edge (m)"
    )
    layer2_y: float = Field(
        default=0.05, description="Bottom layer position from the bottom edge (m)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_layers(self) -> "SectionGeometry":
        """Both layers must lie inside the section, top layer above bottom layer."""
        if not (0.0 < self.y1 < self.h):
            raise ValueError(
                f"Top layer at y1 = {self.y1:.4f} m lies outside the section (0, {self.h:.4f})"
            )
        if not (0.0 < self.y2 < self.h):
            raise ValueError(
                f"Bottom layer at y2 = {self.y2:.4f} m lies outside the section (0, {self.h:.4f})"
            )
        if self.y1 <= self.y2:
            raise ValueError(
                f"Top layer (y1 = {self.y1:.4f} m) must lie above bottom layer (y2 = {self.y2:.4f} m)"
            )
        return self

    @property
    def area(self) -> float:
        """Gross concrete area (m²)."""
        return self.b * self.h

    @property
    def y1(self) -> float:
        """Absolute position of the top layer (m)."""
        return self.h - self.layer1_distance

    @property
    def y2(self) -> float:
        """Absolute position of the bottom layer (m)."""
        return self.layer2_y

    @property
    def y1_norm(self) -> float:
        return self.y1 / self.h

    @property
    def y2_norm(self) -> float:
        return self.y2 / self.h

    @property
    def y1_local(self) -> float:
        """Top layer position relative to the centroid (m)."""
        return self.y1 - self.h / 2

    @property
    def y2_local(self) -> float:
        """Bottom layer position relative to the centroid (m)."""
        return self.y2 - self.h / 2
