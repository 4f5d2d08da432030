from __future__ import annotations
from typing import Optional, Literal, Annotated
from pydantic import BaseModel, Field, ConfigDict

# Common helpers
Positive = Annotated[float, Field(gt=0)]
NonNegative = Annotated[float, Field(ge=0)]

ExposureCat = Literal["B", "C", "D"]
EnclosureCat = Literal["enclosed", "partially_enclosed", "partially_open", "open"]
WallSurfaceName = Literal["windward_wall", "leeward_wall", "side_wall", "parapet"]
# Keys of anchors.DIRECTIONALITY_KD (Table 26.6-1)
StructureType = Literal[
    "building_mwfrs", "building_cc", "arched_roofs",
    "circular_domes", "circular_domes_non_axisymmetric",
    "chimney_square", "chimney_hexagonal", "chimney_octagonal", "chimney_octagonal_non_axisymmetric",
    "chimney_round", "chimney_round_non_axisymmetric",
    "solid_freestanding_walls_signs", "open_signs_single_plane_frames",
    "trussed_towers_rectangular", "trussed_towers_other",
]


# Roof coefficient queries
class WindwardRoofInputs(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    length: Positive
    height: Positive
    angle_deg: float
    # Not constrained: a missing or non-positive area simply disables reduction.
    plan_area: Optional[float] = None


class LeewardRoofInputs(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    h_over_l: float
    angle_deg: float
    plan_area: Optional[float] = None


class ParallelRoofInputs(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    h_over_l: float
    plan_area: Optional[float] = None


class WallInputs(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    surface: WallSurfaceName
    length: Optional[Positive] = None
    width: Optional[Positive] = None


# Velocity pressure / design pressure
class VelocityPressureInputs(BaseModel):
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    v_mph: NonNegative
    exposure: ExposureCat
    z_ft: Annotated[float, Field(gt=0, le=3280)]
    kzt: Positive = 1.0
    ke: Positive = 1.0


class BuildingInputs(BaseModel):
    """Whole-building case: one mean roof height, one roof angle, wind normal to ridge."""
    model_config = ConfigDict(extra="allow", allow_inf_nan=False)
    length: Positive
    width: Positive
    height: Annotated[float, Field(gt=0, le=3280)]
    angle_deg: float
    v_mph: NonNegative
    exposure: ExposureCat = "C"
    enclosure: EnclosureCat = "enclosed"
    structure: StructureType = "building_mwfrs"
    kzt: Positive = 1.0
    ke: Positive = 1.0
    plan_area: Optional[float] = None
