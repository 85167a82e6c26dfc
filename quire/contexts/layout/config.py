"""
Layout configuration: page geometry, fonts and per-role metrics.

Configuration is resolved in three layers, later layers overriding earlier ones:

1. Built-in defaults (defaults.py)
2. Named presets from layout_presets.yaml, applied in order
3. A user YAML file

Examples:
    # Defaults (A4, Helvetica)
    >>> config = load_layout_config()

    # US Letter with tighter spacing
    >>> config = load_layout_config(presets=["page_letter", "spacing_compact"])
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import ConfigAttributeError, ConfigKeyError

from quire.contexts.layout.defaults import get_default_layout
from quire.contexts.layout.exceptions import InvalidLayoutConfigError

load_dotenv()
LAYOUT_PRESETS_PATH = Path(os.getenv("LAYOUT_PRESETS_PATH", "configs/layout_presets.yaml"))


# =============================================================================
# Configuration dataclasses
# =============================================================================


@dataclass(frozen=True)
class PageGeometry:
    """Page size and margins in millimetres."""

    width: float
    height: float
    margin_left: float
    margin_right: float
    margin_top: float
    margin_bottom: float

    @property
    def content_width(self) -> float:
        """Usable column width between the side margins."""
        return self.width - self.margin_left - self.margin_right

    @property
    def break_line(self) -> float:
        """Lowest y position content may reach before a page break."""
        return self.height - self.margin_bottom

    @property
    def center_x(self) -> float:
        return self.width / 2

    @property
    def right_edge(self) -> float:
        return self.width - self.margin_right


@dataclass(frozen=True)
class FontConfig:
    """Regular and bold font names known to the rendering backend."""

    regular: str
    bold: str

    def font_for(self, bold: bool) -> str:
        return self.bold if bold else self.regular


@dataclass(frozen=True)
class NameStyle:
    font_size: float
    space_needed: float
    advance: float


@dataclass(frozen=True)
class ContactStyle:
    font_size: float
    advance: float
    separator: str
    divider_thickness: float
    divider_gap: float


@dataclass(frozen=True)
class SectionHeaderStyle:
    font_size: float
    space_needed: float
    padding_before: float
    advance: float
    underline_offset: float
    underline_thickness: float


@dataclass(frozen=True)
class SubsectionStyle:
    label_font_size: float
    font_size: float
    space_needed: float
    continuation_space_needed: float
    advance: float
    label_gap: float
    wrap_gap: float


@dataclass(frozen=True)
class JobTitleDateStyle:
    font_size: float
    date_font_size: float
    space_needed: float
    padding_before: float
    advance: float
    padding_after: float
    date_gap: float


@dataclass(frozen=True)
class BulletStyle:
    font_size: float
    space_needed: float
    continuation_space_needed: float
    glyph: str
    glyph_offset: float
    text_indent: float
    wrap_inset: float
    advance: float
    final_advance: float


@dataclass(frozen=True)
class ParagraphStyle:
    font_size: float
    space_needed: float
    continuation_space_needed: float
    advance: float


@dataclass(frozen=True)
class BlankStyle:
    advance: float


@dataclass(frozen=True)
class LayoutStyles:
    """Typography and spacing for every block kind."""

    name: NameStyle
    contact: ContactStyle
    section_header: SectionHeaderStyle
    subsection: SubsectionStyle
    job_title_date: JobTitleDateStyle
    bullet: BulletStyle
    paragraph: ParagraphStyle
    blank: BlankStyle


@dataclass(frozen=True)
class LayoutConfig:
    """
    Read-only page geometry and styling supplied at the start of a layout.

    Attributes:
        page: Page size and margins
        fonts: Regular/bold font names
        styles: Per-role metrics (font sizes, space-needed thresholds, advances)
    """

    page: PageGeometry
    fonts: FontConfig
    styles: LayoutStyles

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        """Build a LayoutConfig from a nested dict shaped like get_default_layout()."""
        styles = data["styles"]
        return cls(
            page=PageGeometry(**data["page"]),
            fonts=FontConfig(**data["fonts"]),
            styles=LayoutStyles(
                name=NameStyle(**styles["name"]),
                contact=ContactStyle(**styles["contact"]),
                section_header=SectionHeaderStyle(**styles["section_header"]),
                subsection=SubsectionStyle(**styles["subsection"]),
                job_title_date=JobTitleDateStyle(**styles["job_title_date"]),
                bullet=BulletStyle(**styles["bullet"]),
                paragraph=ParagraphStyle(**styles["paragraph"]),
                blank=BlankStyle(**styles["blank"]),
            ),
        )

    @classmethod
    def default(cls) -> "LayoutConfig":
        return cls.from_dict(get_default_layout())


# =============================================================================
# Loading and validation
# =============================================================================


def load_layout_presets(presets_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load layout_presets.yaml and flatten it to a single-level dict.

    Collapses nested structure: page.letter -> page_letter

    Args:
        presets_path: Optional path to presets file (defaults to LAYOUT_PRESETS_PATH env variable)

    Returns:
        Flattened dict mapping preset names to partial layout configs
        Example: {"page_letter": {"page": {...}}, "spacing_compact": {...}}
    """
    if presets_path is None:
        presets_path = LAYOUT_PRESETS_PATH

    nested = OmegaConf.to_container(OmegaConf.load(presets_path), resolve=True)

    flattened = {}
    for category, presets in nested.items():
        for name, config in presets.items():
            flattened[f"{category}_{name}"] = config

    return flattened


def _merge_strict(base: DictConfig, override: Any, source: Optional[Path] = None) -> DictConfig:
    """Merge override into base, rejecting keys the base does not define."""
    OmegaConf.set_struct(base, True)
    try:
        return OmegaConf.merge(base, override)
    except (ConfigKeyError, ConfigAttributeError) as e:
        raise InvalidLayoutConfigError(
            "Unknown layout setting in override", config_path=source, original_error=e
        ) from e


def validate_layout_config(config: LayoutConfig) -> LayoutConfig:
    """
    Check that the geometry leaves room for content.

    Raises:
        InvalidLayoutConfigError: If content width or usable height is not positive
    """
    page = config.page
    if page.content_width <= 0:
        raise InvalidLayoutConfigError(
            f"Side margins ({page.margin_left} + {page.margin_right}) leave no content "
            f"width on a {page.width} wide page"
        )
    if page.break_line <= page.margin_top:
        raise InvalidLayoutConfigError(
            f"Top margin {page.margin_top} is at or below the bottom break line {page.break_line}"
        )
    return config


def load_layout_config(
    config_path: Optional[Path] = None,
    presets: Optional[List[str]] = None,
    presets_path: Optional[Path] = None,
) -> LayoutConfig:
    """
    Resolve a LayoutConfig from defaults, presets and an optional YAML file.

    Args:
        config_path: Optional YAML file overriding any default (same shape as defaults)
        presets: Preset names applied in order (e.g., ["page_letter", "spacing_compact"])
        presets_path: Optional path to layout_presets.yaml (defaults to LAYOUT_PRESETS_PATH)

    Returns:
        Validated LayoutConfig

    Raises:
        ValueError: If a preset name is not defined
        InvalidLayoutConfigError: If an override has unknown keys or unusable geometry
    """
    merged = OmegaConf.create(get_default_layout())

    if presets:
        presets_dict = load_layout_presets(presets_path)
        for preset_name in presets:
            if preset_name not in presets_dict:
                available = list(presets_dict.keys())
                raise ValueError(
                    f"Preset '{preset_name}' not found. Available presets: {available}"
                )
            merged = _merge_strict(merged, presets_dict[preset_name])

    if config_path is not None:
        config_path = Path(config_path)
        merged = _merge_strict(merged, OmegaConf.load(config_path), source=config_path)

    data = OmegaConf.to_container(merged, resolve=True)
    try:
        config = LayoutConfig.from_dict(data)
    except TypeError as e:
        raise InvalidLayoutConfigError(
            "Layout settings do not match the expected structure",
            config_path=config_path,
            original_error=e,
        ) from e

    return validate_layout_config(config)
