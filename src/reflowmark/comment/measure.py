# topmark:header:start
#
#   project      : ReflowMark
#   file         : measure.py
#   file_relpath : src/reflowmark/comment/measure.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text width measurement.

A measurement maps a piece of text to a non-negative width. Callers rely on
``width("") == 0`` and on monotonicity (a longer string of the same kind is
never narrower), but never on additivity.

Implementations:
    * `CharMeasurement`: columns, with tab expansion to the next tab stop.
    * `PixelMeasurement`: rendered extent from a font object exposing
      ``getlength(text)`` (the Pillow ``ImageFont`` protocol), expressed in
      average-character units so configured widths stay in columns.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from PIL import ImageFont

from reflowmark.config.logging import get_logger
from reflowmark.config.types import MeasurementMode
from reflowmark.core.errors import ConfigurationError, MeasurementError

if TYPE_CHECKING:
    from reflowmark.config.logging import ReflowmarkLogger
    from reflowmark.config.model import Config

logger: ReflowmarkLogger = get_logger(__name__)

# Sample used to derive the average character width of a font
_AVERAGE_SAMPLE: str = string.ascii_lowercase


@runtime_checkable
class TextMeasurement(Protocol):
    """Protocol for width measurements."""

    def width(self, text: str) -> float:
        """Return the width of ``text``."""
        ...


class FontLike(Protocol):
    """Minimal font protocol (satisfied by ``PIL.ImageFont.FreeTypeFont``)."""

    def getlength(self, text: str) -> float:
        """Return the advance width of ``text`` in pixels."""
        ...


@dataclass(frozen=True, slots=True)
class CharMeasurement:
    """Measure text in character columns.

    Tabs advance to the next multiple of ``tab_size``, counted from the start
    of the measured text.
    """

    tab_size: int = 4

    def width(self, text: str) -> float:
        column = 0
        for ch in text:
            if ch == "\t":
                column += self.tab_size - column % self.tab_size
            else:
                column += 1
        return float(column)


@dataclass(frozen=True, slots=True, eq=False)
class PixelMeasurement:
    """Measure text with a font, normalized to average character widths.

    Tabs count as ``tab_size`` spaces. Any error raised by the font is
    reported as a `MeasurementError`.
    """

    font: FontLike
    tab_size: int = 4

    def _length(self, text: str) -> float:
        try:
            value = float(self.font.getlength(text))
        except Exception as e:
            raise MeasurementError(f"Font failed to measure {text!r}: {e}") from e
        if math.isnan(value) or value < 0:
            raise MeasurementError(f"Font returned invalid width {value!r} for {text!r}")
        return value

    def width(self, text: str) -> float:
        if not text:
            return 0.0
        average = self._length(_AVERAGE_SAMPLE) / len(_AVERAGE_SAMPLE)
        if average <= 0:
            raise MeasurementError("Font reports a zero average character width")
        return self._length(text.replace("\t", " " * self.tab_size)) / average


@dataclass(frozen=True, slots=True, eq=False)
class CheckedMeasurement:
    """Wrap a host measurement so that every failure surfaces as `MeasurementError`."""

    inner: TextMeasurement

    def width(self, text: str) -> float:
        try:
            value = self.inner.width(text)
        except MeasurementError:
            raise
        except Exception as e:
            raise MeasurementError(f"Measurement failed for {text!r}: {e}") from e
        if not isinstance(value, (int, float)) or math.isnan(value) or value < 0:
            raise MeasurementError(f"Invalid width {value!r} for {text!r}")
        return float(value)


def load_font(path: str, size: int) -> FontLike:
    """Load a TrueType or OpenType font with Pillow.

    Raises:
        ConfigurationError: If the font file cannot be opened or parsed.
    """
    try:
        font = ImageFont.truetype(path, size)
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Cannot load font {path!r}: {e}") from e
    logger.debug("Loaded font %s at size %d", path, size)
    return font


def create_measurement(config: Config, font: FontLike | None = None) -> TextMeasurement:
    """Return the measurement selected by ``config.measurement_mode``.

    In pixel mode an explicit ``font`` wins over ``config.font_path``.

    Raises:
        ConfigurationError: Pixel mode was requested without a usable font.
    """
    if config.measurement_mode is MeasurementMode.PIXEL:
        if font is None and config.font_path is not None:
            font = load_font(config.font_path, config.font_size)
        if font is None:
            raise ConfigurationError(
                "measurement_mode 'pixel' requires a font (set font_path or pass --font)"
            )
        logger.debug("Using pixel measurement with font %r", font)
        return PixelMeasurement(font=font, tab_size=config.tab_size)
    return CharMeasurement(tab_size=config.tab_size)
