"""
Layout constants for the project map.
Tunable without changing behavior: box size, gaps and padding only move pixels.
"""

from pydantic import BaseModel, ConfigDict, Field

# Node box (top-left anchored)
DEFAULT_NODE_W = 300
DEFAULT_NODE_H = 120

# Horizontal gap between layers; connector control points sit at half of it
DEFAULT_X_GAP = 100

# Vertical gap between nodes stacked in one layer
DEFAULT_Y_GAP = 40

# Canvas padding
DEFAULT_PADDING = 80

# Layers are centered within at least this height
DEFAULT_MIN_CANVAS_H = 800


class LayoutConfig(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    node_width: float = Field(DEFAULT_NODE_W, gt=0, alias="nodeWidth")
    node_height: float = Field(DEFAULT_NODE_H, gt=0, alias="nodeHeight")
    x_gap: float = Field(DEFAULT_X_GAP, ge=0, alias="xGap")
    y_gap: float = Field(DEFAULT_Y_GAP, ge=0, alias="yGap")
    padding: float = Field(DEFAULT_PADDING, ge=0)
    min_canvas_height: float = Field(DEFAULT_MIN_CANVAS_H, ge=0, alias="minCanvasHeight")

    @property
    def column_step(self) -> float:
        """Distance between the left edges of two adjacent layers."""
        return self.node_width + self.x_gap

    @property
    def row_step(self) -> float:
        return self.node_height + self.y_gap


DEFAULT_LAYOUT = LayoutConfig()
