"""
jam_engine/drums.py — Drum pattern generator.

generate_pattern() renders a groove template into timed DrumEvents.

Algorithm:
    1. Load the groove templates (templates/grooves.yaml, cached)
    2. Look up the groove for options.style
    3. For each measure (offset = measure × beats_per_measure), walk the
       groove's layers in template order:
         hits  — fixed beats, emitted in every meter (in 3/4 a hit
                 on beat 3 shares its time with the next downbeat)
         pulse — "beat", "eighth" or "offbeat" grid across the measure,
                 velocities cycling over grid positions
    4. Return events in generation order (measure, then layer, then time)

Every event lasts DRUM_HIT_DURATION beats: drums are one-shots, the value is
there so drum and bass events share the same timed-event shape.

Events are never sorted or deduplicated; two layers may hit at the same
time and both events are kept.

Design decisions:
    - Template-driven: all rhythm lives in YAML, the code is generic
    - Pure after the first load; the cached template dict is never mutated
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Any

import yaml

from jam_engine.options import DrumPatternOptions
from jam_engine.types import DrumEvent

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DRUM_HIT_DURATION: float = 0.25

_TEMPLATES_DIR: Path = Path(__file__).parent / "templates"
_GROOVES_FILE: str = "grooves.yaml"

# Pulse name → (subdivisions per beat, offset within the subdivision in beats)
_PULSES: dict[str, tuple[int, float]] = {
    "beat": (1, 0.0),
    "eighth": (2, 0.0),
    "offbeat": (1, 0.5),
}


# ---------------------------------------------------------------------------
# YAML loading: lazy, cached, pure after first load
# ---------------------------------------------------------------------------


@functools.cache
def _load_grooves() -> dict[str, Any]:
    """Load and cache every groove template.

    Returns:
        Parsed YAML dict, style name → groove

    Raises:
        ValueError: If the template file is missing or malformed
    """
    template_path = _TEMPLATES_DIR / _GROOVES_FILE
    if not template_path.exists():
        raise ValueError(f"Template file not found: {template_path}")

    with template_path.open() as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict):
        raise ValueError(f"Groove template {template_path} must be a mapping of styles")
    logger.debug("Loaded %d groove templates from %s", len(data), template_path)
    return data


def available_styles() -> list[str]:
    """Return the sorted list of groove styles defined in the templates."""
    return sorted(_load_grooves())


def _get_groove(style: str) -> dict[str, Any]:
    grooves = _load_grooves()
    groove = grooves.get(style)
    if groove is None:
        raise ValueError(f"Unknown style {style!r}. Valid: {sorted(grooves)}")
    return groove


# ---------------------------------------------------------------------------
# Layer rendering
# ---------------------------------------------------------------------------


def _render_hits(drum: str, hits: list[dict[str, Any]], offset: float) -> list[DrumEvent]:
    return [
        DrumEvent(
            drum=drum,
            time=offset + hit["beat"],
            duration=DRUM_HIT_DURATION,
            velocity=float(hit["velocity"]),
        )
        for hit in hits
    ]


def _render_pulse(
    drum: str, pulse: str, velocities: list[float], offset: float, beats: int
) -> list[DrumEvent]:
    try:
        subdivisions, shift = _PULSES[pulse]
    except KeyError:
        raise ValueError(f"Unknown pulse {pulse!r}. Valid: {sorted(_PULSES)}") from None

    step = 1.0 / subdivisions
    return [
        DrumEvent(
            drum=drum,
            time=offset + position * step + shift,
            duration=DRUM_HIT_DURATION,
            velocity=float(velocities[position % len(velocities)]),
        )
        for position in range(beats * subdivisions)
    ]


def _render_layer(layer: dict[str, Any], offset: float, beats: int) -> list[DrumEvent]:
    drum = layer["drum"]
    if "hits" in layer:
        return _render_hits(drum, layer["hits"], offset)
    return _render_pulse(drum, layer["pulse"], layer["velocities"], offset, beats)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def generate_pattern(options: DrumPatternOptions | None = None) -> tuple[DrumEvent, ...]:
    """Generate a drum pattern from a groove template.

    Args:
        options: Style, number of measures and meter
                 (default: rock, 1 measure, 4 beats)

    Returns:
        Tuple of DrumEvent in generation order.

    Raises:
        ValueError: If the style has no groove template

    Examples:
        >>> events = generate_pattern()
        >>> len(events)
        8
        >>> [(e.drum, e.time) for e in events[:2]]
        [('kick', 0.0), ('kick', 2.0)]
    """
    opts = options or DrumPatternOptions()
    groove = _get_groove(opts.style)
    beats = opts.beats_per_measure

    events: list[DrumEvent] = []
    for measure in range(opts.measures):
        offset = float(measure * beats)
        for layer in groove["layers"]:
            events.extend(_render_layer(layer, offset, beats))
    return tuple(events)
