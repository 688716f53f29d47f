"""Pydantic models for the JSON export.

WHY: The JSON export is meant for other tools, so its shape should be
explicit and machine-checkable. Pydantic models validate field types,
serialize the export, and generate the JSON Schema that consumers (and the
test suite) validate against.

HOW: One model per level: ColorModel, RecordModel, SaveDocument. The
from_* classmethods convert the core dataclasses.

RULES:
- All models use Field(description=...) so the generated schema documents itself
- Field names match the core dataclasses exactly
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
- Non-finite floats are written as the strings "Infinity", "-Infinity" and
  "NaN"; the schema for ExportFloat fields allows exactly those strings
"""

from __future__ import annotations

from typing import Annotated, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, WithJsonSchema

from bls_decoder.core.model import Color, Record
from bls_decoder.formatters.base import DecodedSave

NON_FINITE_STRINGS = ["Infinity", "-Infinity", "NaN"]

ExportFloat = Annotated[
    float,
    WithJsonSchema({
        "anyOf": [
            {"type": "number"},
            {"type": "string", "enum": NON_FINITE_STRINGS},
        ]
    }),
]
"""A float that may be inf or nan, serialized as a string when it is."""


class ExportModel(BaseModel):
    """Base for every export model; keeps inf/nan instead of writing null."""

    model_config = ConfigDict(ser_json_inf_nan="strings")


class ColorModel(ExportModel):
    """One palette entry, un-normalized RGBA."""

    r: ExportFloat = Field(description="Red component as written in the file.")
    g: ExportFloat = Field(description="Green component as written in the file.")
    b: ExportFloat = Field(description="Blue component as written in the file.")
    a: ExportFloat = Field(description="Alpha component; 1.0 or more is opaque.")

    @classmethod
    def from_color(cls, color: Color) -> "ColorModel":
        return cls(r=color.r, g=color.g, b=color.b, a=color.a)


class RecordModel(ExportModel):
    """One brick with its raw extra-data lines."""

    label: str = Field(description="Datablock UI name of the brick.")
    position: Tuple[ExportFloat, ExportFloat, ExportFloat] = Field(description="Brick position (x, y, z).")
    orientation: int = Field(description="Rotation index, 0-3 in valid files.")
    is_special_base: bool = Field(description="Whether the datablock is a baseplate.")
    palette_index: int = Field(description="Index into the palette, 0-63 in valid files.")
    print_name: str = Field(description="Print texture name; empty for no print.")
    color_effect: int = Field(description="Colour effect id (glow, rainbow, ...).")
    shape_effect: int = Field(description="Shape effect id (undulo, water, ...).")
    castable_ray: bool = Field(description="Whether raycasts hit the brick.")
    collidable: bool = Field(description="Whether objects collide with the brick.")
    visible: bool = Field(description="Whether the brick is rendered.")
    continuations: List[str] = Field(
        default_factory=list,
        description='Unmodeled "+-" lines that followed the brick, verbatim.',
    )

    @classmethod
    def from_record(cls, record: Record) -> "RecordModel":
        base = record.base
        return cls(
            label=base.label,
            position=base.position,
            orientation=base.orientation,
            is_special_base=base.is_special_base,
            palette_index=base.palette_index,
            print_name=base.print_name,
            color_effect=base.color_effect,
            shape_effect=base.shape_effect,
            castable_ray=base.castable_ray,
            collidable=base.collidable,
            visible=base.visible,
            continuations=list(record.continuations),
        )


class SaveDocument(ExportModel):
    """Complete JSON export of a decoded save."""

    source_filename: str = Field(description="Name of the decoded file.")
    description: str = Field(description="Description text with escapes resolved.")
    palette: List[ColorModel] = Field(description="The 64 palette colours.")
    declared_count: Optional[int] = Field(
        default=None,
        description="Brick count claimed by the file, if any. Advisory only.",
    )
    record_count: int = Field(description="Number of bricks successfully decoded.")
    records: List[RecordModel] = Field(description="Decoded bricks in file order.")
    error: Optional[str] = Field(
        default=None,
        description="Failure that ended decoding early, if any.",
    )

    @classmethod
    def from_decoded(cls, save: DecodedSave) -> "SaveDocument":
        return cls(
            source_filename=save.source_filename,
            description=save.description,
            palette=[ColorModel.from_color(c) for c in save.palette],
            declared_count=save.declared_count,
            record_count=save.record_count,
            records=[RecordModel.from_record(r) for r in save.records],
            error=save.error,
        )
