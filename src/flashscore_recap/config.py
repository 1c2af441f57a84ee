"""Configuration helpers for the flashscore_recap toolkit."""
from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import yaml

DEFAULT_COMPETITIONS: tuple[str, ...] = (
    # Cuba - Serie Nacional
    "https://www.flashscore.com/baseball/cuba/serie-nacional/results/",
    # Dominican Republic - LIDOM
    "https://www.flashscore.com/baseball/dominican-republic/lidom/results/",
    # Venezuela - LVBP
    "https://www.flashscore.com/baseball/venezuela/lvbp/results/",
    # Mexico - LMP
    "https://www.flashscore.com/baseball/mexico/lmp/results/",
    # Puerto Rico - LBPRC
    "https://www.flashscore.com/baseball/puerto-rico/lbprc/results/",
    # Colombia - LPB
    "https://www.flashscore.com/baseball/colombia/lpb/results/",
    # Australia - ABL
    "https://www.flashscore.ph/en/baseball/australia/abl/results/",
)
DEFAULT_TIMEZONE = "Europe/Amsterdam"
DEFAULT_OUTPUT_DIR = Path("out")
RENDERERS = ("browser", "snapshot")


class ConfigError(ValueError):
    """Raised for configuration problems that must abort the run."""


@dataclass(frozen=True, slots=True)
class Selectors:
    """CSS selectors and class markers of a Flashscore results page."""

    match_list: str = ".sportName.baseball, .sportName"
    row: str = ".event__match.event__match--twoLine, .event__match"
    finished_class: str = "event__match--finished"
    row_time: str = ".event__time"
    day_header_class: str = "event__day"
    home_participant: str = ".event__participant--home"
    away_participant: str = ".event__participant--away"
    home_score: str = ".event__score--home"
    away_score: str = ".event__score--away"
    heading: str = "h1"
    consent_button: str = 'button:has-text("Accept all")'

    def with_overrides(self, overrides: Mapping[str, object]) -> "Selectors":
        known = {item.name for item in fields(self)}
        unknown = sorted(str(key) for key in overrides if key not in known)
        if unknown:
            raise ConfigError(f"Unknown selector keys: {', '.join(unknown)}")
        values = {
            str(key): str(value).strip()
            for key, value in overrides.items()
            if value is not None and str(value).strip()
        }
        return replace(self, **values)


def validate_timezone(name: str) -> ZoneInfo:
    """Return the zone for ``name`` or raise :class:`ConfigError`."""

    cleaned = (name or "").strip()
    if not cleaned:
        raise ConfigError("A timezone name is required.")
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ConfigError(f"Unknown timezone: {cleaned!r}") from exc


def _coerce_int(value: object, default: int, key: str) -> int:
    if value is None:
        return default
    try:
        number = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from exc
    if number < 0:
        raise ConfigError(f"{key} must not be negative, got {number}")
    return number


@dataclass(frozen=True, slots=True)
class RecapConfig:
    """Root configuration model."""

    competitions: Sequence[str] = DEFAULT_COMPETITIONS
    timezone: str = DEFAULT_TIMEZONE
    output_dir: Path = DEFAULT_OUTPUT_DIR
    renderer: str = "browser"
    headless: bool = True
    consent_timeout_ms: int = 2000
    match_list_timeout_ms: int = 15000
    selectors: Selectors = field(default_factory=Selectors)

    def __post_init__(self) -> None:
        validate_timezone(self.timezone)
        if self.renderer not in RENDERERS:
            raise ConfigError(
                f"Unknown renderer {self.renderer!r}, expected one of {', '.join(RENDERERS)}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "RecapConfig":
        competitions: Sequence[str] = DEFAULT_COMPETITIONS
        raw_competitions = mapping.get("competitions")
        if raw_competitions is not None:
            if isinstance(raw_competitions, (str, bytes)) or not isinstance(
                raw_competitions, Sequence
            ):
                raise ConfigError("competitions must be a list of URLs.")
            urls: List[str] = []
            for item in raw_competitions:
                url = str(item or "").strip()
                if url:
                    urls.append(url)
            competitions = tuple(urls)

        timezone = str(mapping.get("timezone") or DEFAULT_TIMEZONE).strip()
        output_dir = Path(str(mapping.get("output_dir") or DEFAULT_OUTPUT_DIR))
        renderer = str(mapping.get("renderer") or "browser").strip().lower()
        headless_value = mapping.get("headless", True)
        headless = bool(headless_value) if headless_value is not None else True

        selectors = Selectors()
        raw_selectors = mapping.get("selectors")
        if raw_selectors is not None:
            if not isinstance(raw_selectors, Mapping):
                raise ConfigError("selectors must be a mapping.")
            selectors = selectors.with_overrides(raw_selectors)

        return cls(
            competitions=competitions,
            timezone=timezone,
            output_dir=output_dir,
            renderer=renderer,
            headless=headless,
            consent_timeout_ms=_coerce_int(
                mapping.get("consent_timeout_ms"), 2000, "consent_timeout_ms"
            ),
            match_list_timeout_ms=_coerce_int(
                mapping.get("match_list_timeout_ms"), 15000, "match_list_timeout_ms"
            ),
            selectors=selectors,
        )


def load_config(path: Optional[Path] = None) -> RecapConfig:
    """Load a configuration file from YAML, or the defaults without one."""

    if path is None:
        return RecapConfig()
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ConfigError("Configuration file must contain a mapping at the root.")
    return RecapConfig.from_mapping(data)
