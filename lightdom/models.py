"""Pydantic models for render configuration and declarative node trees."""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import InvalidConfigError
from .nodes import ClosingType, DisplayType


class RenderConfig(BaseModel):
    """Options controlling how a tree is turned into markup."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    merge_classes: bool = Field(
        False,
        alias="mergeClasses",
        description=(
            "Emit one space-joined class attribute instead of one class "
            "attribute per entry."
        ),
    )
    document_title: str = Field(
        "lightdom", alias="documentTitle", description="Title used by render_document."
    )
    lang: str = Field("en", description="Value of the html lang attribute.")


class TextSpec(BaseModel):
    """Declarative text node."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["text"] = "text"
    text: str = Field(..., description="Raw text, rendered verbatim.")


class ElementSpec(BaseModel):
    """Declarative element node with nested children."""

    model_config = ConfigDict(extra="forbid")

    type: Literal["element"] = "element"
    tag: str = Field(..., min_length=1, description="Tag name, e.g. p or img.")
    display: DisplayType = Field(DisplayType.BLOCK, description="Descriptive display type.")
    closing: ClosingType = Field(
        ClosingType.CLOSING_TAG, description="single renders <tag />, closing renders a pair."
    )
    classes: List[str] = Field(default_factory=list, description="Class names in order.")
    children: List["NodeSpec"] = Field(
        default_factory=list, description="Child nodes; plain strings become text nodes."
    )

    @field_validator("children", mode="before")
    @classmethod
    def _expand_text_shorthand(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [with_node_type(item) for item in value]
        return value


NodeSpec = Annotated[Union[TextSpec, ElementSpec], Field(discriminator="type")]

ElementSpec.model_rebuild()


def with_node_type(item: Any) -> Any:
    """Expand text shorthand and fill in a missing ``type`` key.

    A string becomes a text node; a mapping with ``tag`` is an element and
    one with ``text`` is a text node. Anything else is left for validation.
    """
    if isinstance(item, str):
        return {"type": "text", "text": item}
    if isinstance(item, dict) and "type" not in item:
        if "tag" in item:
            return {"type": "element", **item}
        if "text" in item:
            return {"type": "text", **item}
    return item


def load_render_config(text: str | None) -> RenderConfig:
    """Parse YAML text into a RenderConfig; empty input yields defaults."""
    try:
        data = yaml.safe_load(text) if text else None
    except yaml.YAMLError as exc:
        raise InvalidConfigError(f"Invalid YAML config: {exc}") from exc
    return RenderConfig.model_validate(data or {})


__all__ = ["ElementSpec", "NodeSpec", "RenderConfig", "TextSpec", "load_render_config", "with_node_type"]
