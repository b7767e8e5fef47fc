"""
openFDA Response Schemas

Pydantic models for the parts of the openFDA drug label response that the
lookup relies on. Every other field is allowed through untouched.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class OpenFdaFields(BaseModel):
    """Harmonized ``openfda`` block of a label."""

    model_config = ConfigDict(extra="allow")

    brand_name: List[str] = Field(..., min_length=1)
    generic_name: List[str] = Field(default_factory=list)
    manufacturer_name: List[str] = Field(default_factory=list)


class OpenFdaLabel(BaseModel):
    """One label document."""

    model_config = ConfigDict(extra="allow")

    openfda: OpenFdaFields


class OpenFdaLabelResponse(BaseModel):
    """Response of ``/drug/label.json``."""

    model_config = ConfigDict(extra="allow")

    results: List[OpenFdaLabel] = Field(..., min_length=1)
