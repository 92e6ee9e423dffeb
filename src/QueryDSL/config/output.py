"""Output domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from QueryDSL.config.common import (
    expect_int,
    expect_str_list,
    get_optional_value,
    get_section,
)

_ALLOWED_FORMATS = {"json", "binary"}


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Output configuration.

    Attributes:
        formats: Output formats, in order. ``json`` prints structured output,
            ``binary`` prints the hex-encoded stream form.
        indent: JSON indent; 0 means compact single-line output.
    """

    formats: tuple[str, ...] = ("json",)
    indent: int = 2


def load_output(raw: Mapping[str, Any]) -> OutputConfig:
    """Load output domain config from raw mapping.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "output", required=False)
    defaults = OutputConfig()
    formats = tuple(
        item.strip().lower()
        for item in expect_str_list(get_optional_value(section, "formats", list(defaults.formats)), "output.formats")
    )
    return OutputConfig(
        formats=formats,
        indent=expect_int(get_optional_value(section, "indent", defaults.indent), "output.indent"),
    )


def check_output(config: OutputConfig) -> None:
    """Validate output domain constraints.

    Raises:
        ValueError: If values violate output constraints.
    """
    if not config.formats:
        raise ValueError("output.formats must include at least one format")

    unknown = set(config.formats) - _ALLOWED_FORMATS
    if unknown:
        raise ValueError(f"output.formats has unknown formats: {sorted(unknown)}")
    if config.indent < 0:
        raise ValueError("output.indent must be 0 or positive")
