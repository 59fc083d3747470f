"""
Slide Config Models

Pydantic v2 models for the declarative slide-layout document, and loaders
that read it from JSON or YAML directly or from an interpolated JSON template.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .colors import ColorReference, RgbColor, as_color_reference
from .errors import InputParseError
from .interpolate import interpolate_variables

YAML_SUFFIXES = {".yaml", ".yml"}


class CamelModel(BaseModel):
    """Base model reading and writing camelCase document keys."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SlideTheme(CamelModel):
    """Per-deck color overrides and default font."""
    colors: Dict[str, RgbColor] = Field(default_factory=dict)
    default_font: Optional[str] = None


class SlideElement(CamelModel):
    """A positioned text box. Position and size are in points."""
    text: str
    x: float
    y: float
    w: float = Field(ge=0)
    h: float = Field(ge=0)
    size: float = Field(gt=0)
    color: ColorReference
    bold: bool = False

    @field_validator("color", mode="before")
    @classmethod
    def coerce_color(cls, v: Any) -> ColorReference:
        return as_color_reference(v)


class SlideDefinition(CamelModel):
    """One slide: optional background, text elements in z-order, optional notes."""
    background: Optional[ColorReference] = None
    elements: List[SlideElement] = Field(default_factory=list)
    notes: Optional[str] = None

    @field_validator("background", mode="before")
    @classmethod
    def coerce_background(cls, v: Any) -> Optional[ColorReference]:
        if v is None:
            return None
        return as_color_reference(v)


class SlideConfig(CamelModel):
    """The whole deck. ``presentation_id`` switches to replacing an existing deck."""
    title: str
    theme: Optional[SlideTheme] = None
    slides: List[SlideDefinition] = Field(default_factory=list)
    presentation_id: Optional[str] = None

    @property
    def theme_colors(self) -> Optional[Dict[str, RgbColor]]:
        return self.theme.colors if self.theme else None


# ============================================================
# PARSING
# ============================================================

def validation_issues(exc: ValidationError) -> List[str]:
    issues = []
    for error in exc.errors():
        loc = " -> ".join(str(p) for p in error["loc"]) or "(root)"
        issues.append(f"{loc}: {error['msg']}")
    return issues


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise InputParseError(str(path), ["File not found"]) from None


def _parse_document(text: str, source: Optional[str], use_yaml: bool = False) -> Any:
    if use_yaml:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise InputParseError(source, [f"Invalid YAML: {exc}"]) from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise InputParseError(source, [f"Invalid JSON: {exc}"]) from exc


def config_from_dict(data: Any, source: Optional[str] = None) -> SlideConfig:
    """Validate a parsed document as a SlideConfig."""
    if not isinstance(data, dict):
        raise InputParseError(source, ["Top-level value must be an object"])
    try:
        return SlideConfig.model_validate(data)
    except ValidationError as exc:
        raise InputParseError(source, validation_issues(exc)) from exc


def parse_config(text: str, source: Optional[str] = None) -> SlideConfig:
    """Parse JSON text into a SlideConfig."""
    return config_from_dict(_parse_document(text, source), source)


# ============================================================
# LOADING
# ============================================================

def load_config(path: Union[str, Path]) -> SlideConfig:
    """Load a SlideConfig from a JSON or YAML file."""
    path = Path(path)
    text = _read_text(path)
    data = _parse_document(text, str(path), use_yaml=path.suffix.lower() in YAML_SUFFIXES)
    return config_from_dict(data, str(path))


def load_template(path: Union[str, Path], data: Dict[str, Any]) -> SlideConfig:
    """Load a JSON template, fill ``{{placeholders}}`` from data, and parse it."""
    path = Path(path)
    text = interpolate_variables(_read_text(path), data)
    return parse_config(text, str(path))


def load_data(path: Union[str, Path]) -> Dict[str, Any]:
    """Load the data record used to fill a template (JSON or YAML mapping)."""
    path = Path(path)
    data = _parse_document(
        _read_text(path), str(path), use_yaml=path.suffix.lower() in YAML_SUFFIXES
    )
    if not isinstance(data, dict):
        raise InputParseError(str(path), ["Template data must be an object"])
    return data
