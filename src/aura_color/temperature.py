"""
Warm/cool color temperature, and the complementary and analogous colors
derived from it.

Art theory treats warm and cool as the basis of color harmony: a complement
is as cool as the input is warm, and analogous colors are evenly spaced in
temperature rather than in hue angle. ``TemperatureCache`` precomputes the
temperature of every integer hue at the input's chroma and tone so those
questions become table lookups.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from . import hct_solver
from .color_utils import lab_from_argb
from .hct import Hct
from .math_utils import round_half_up, sanitize_degrees_double, sanitize_degrees_int

logger = logging.getLogger(__name__)

HUE_COUNT = 361


def raw_temperature(argb: int) -> float:
    """
    Cool-warm factor of a color, after Ou, Woodcock and Wright.

    Uses L*a*b* hue and chroma. Values below 0 are cool, above 0 warm.
    Assuming a maximum L*a*b* chroma of 130 the range is about
    -9.66 to 8.61.
    """
    _, a, b = lab_from_argb(argb)
    hue = sanitize_degrees_double(math.degrees(math.atan2(b, a)))
    chroma = math.hypot(a, b)
    return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(math.radians(sanitize_degrees_double(hue - 50.0)))


def _is_between(angle: int, a: int, b: int) -> bool:
    """Whether angle lies on the clockwise arc from a to b, inclusive."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b


class TemperatureCache:
    """
    Temperature table for one input color.

    Every color this cache returns keeps the input's chroma and tone, except
    where a hue cannot reach that chroma in gamut.

    The table is built in full on construction and never changes afterwards.
    """

    def __init__(self, input_hct: Hct):
        """
        Args:
            input_hct: Color to find the complement and analogous colors of
        """
        self._input = input_hct
        self._input_hue = round_half_up(input_hct.hue)

        # Scan every integer hue at the input's chroma and tone
        temps = np.array(
            [
                raw_temperature(hct_solver.solve_to_int(float(hue), input_hct.chroma, input_hct.tone))
                for hue in range(HUE_COUNT)
            ],
            dtype=np.float64,
        )

        # Derive extrema; argmin/argmax keep the first hue on ties
        coldest_hue = int(np.argmin(temps))
        warmest_hue = int(np.argmax(temps))
        coldest_temp = float(temps[coldest_hue])
        warmest_temp = float(temps[warmest_hue])

        # The input itself replaces its rounded hue's entry
        input_temp = raw_temperature(input_hct.argb)
        temps[self.input_hue] = input_temp
        if input_temp < coldest_temp:
            coldest_temp = input_temp
            coldest_hue = self.input_hue
        if input_temp > warmest_temp:
            warmest_temp = input_temp
            warmest_hue = self.input_hue

        temps.setflags(write=False)
        self._temps_by_hue = temps
        self._coldest_temp = coldest_temp
        self._warmest_temp = warmest_temp
        self._temp_range = warmest_temp - coldest_temp
        self._coldest_hue = coldest_hue
        self._warmest_hue = warmest_hue

        logger.debug(
            "Temperature cache for %s: coldest hue %d (%.3f), warmest hue %d (%.3f)",
            input_hct,
            coldest_hue,
            coldest_temp,
            warmest_hue,
            warmest_temp,
        )

    @property
    def temps_by_hue(self) -> np.ndarray:
        """Raw temperature per integer hue 0..360 (read-only)."""
        return self._temps_by_hue

    @property
    def input(self) -> Hct:
        return self._input

    @property
    def input_hue(self) -> int:
        """Input hue rounded to the table's integer hues."""
        return self._input_hue

    @property
    def coldest_temp(self) -> float:
        return self._coldest_temp

    @property
    def warmest_temp(self) -> float:
        return self._warmest_temp

    @property
    def temp_range(self) -> float:
        return self._temp_range

    @property
    def coldest_hue(self) -> int:
        return self._coldest_hue

    @property
    def warmest_hue(self) -> int:
        return self._warmest_hue

    @property
    def coldest(self) -> Hct:
        return self.input.with_hue(float(self.coldest_hue))

    @property
    def warmest(self) -> Hct:
        return self.input.with_hue(float(self.warmest_hue))

    @property
    def input_relative_temperature(self) -> float:
        return self.relative_temperature(self.input_hue)

    def relative_temperature(self, hue: int) -> float:
        """
        Temperature of a hue relative to every hue at the input's chroma and
        tone.

        Returns:
            0.0 for the coldest hue up to 1.0 for the warmest. 0.5 when all
            hues share one temperature, e.g. at tone 100 only white exists.
        """
        if self.temp_range == 0.0:
            return 0.5
        return (float(self._temps_by_hue[hue]) - self.coldest_temp) / self.temp_range

    @property
    def complement(self) -> Hct:
        """
        A color that complements the input.

        Searches the arc of the wheel opposite the input, split at the coldest
        and warmest hues, for the hue whose relative temperature is closest to
        ``1 - relative_temperature(input)``.
        """
        if self.temp_range == 0.0:
            return self.input.with_hue(float(self.input_hue))

        coldest_to_warmest = _is_between(self.input_hue, self.coldest_hue, self.warmest_hue)
        start_hue = self.warmest_hue if coldest_to_warmest else self.coldest_hue
        end_hue = self.coldest_hue if coldest_to_warmest else self.warmest_hue
        smallest_error = 1000.0
        answer = self.input_hue

        complement_relative_temp = 1.0 - self.input_relative_temperature
        for hue_addend in range(HUE_COUNT):
            hue = sanitize_degrees_int(start_hue + hue_addend)
            if not _is_between(hue, start_hue, end_hue):
                continue
            error = abs(complement_relative_temp - self.relative_temperature(hue))
            if error < smallest_error:
                smallest_error = error
                answer = hue
        return self.input.with_hue(float(answer))

    def get_complement(self) -> Hct:
        return self.complement

    def analogous_colors(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """
        Colors with differing hues, equidistant in temperature.

        Art theory usually divides the wheel into 12 sections and picks 5
        adjacent colors; both numbers are configurable. Colors repeat when
        ``divisions < count``.

        Args:
            count: Number of colors to return, including the input
            divisions: Number of sections on the color wheel

        Returns:
            ``(count - 1) // 2`` colors counter-clockwise of the input, the
            input, then the rest clockwise

        Raises:
            ValueError: If count or divisions is below 1
        """
        return [self.input.with_hue(float(hue)) for hue in self._analogous_hues(count, divisions)]

    def analogous_color_at(self, count: int, divisions: int, index: int) -> Hct:
        """
        The color at ``index`` of ``analogous_colors(count, divisions)``.

        Raises:
            ValueError: If count or divisions is below 1
            IndexError: If index is outside [0, count)
        """
        hues = self._analogous_hues(count, divisions)
        if not 0 <= index < count:
            raise IndexError(f"index must be within [0, {count}), got {index}")
        return self.input.with_hue(float(hues[index]))

    def _analogous_hues(self, count: int, divisions: int) -> list[int]:
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        if divisions < 1:
            raise ValueError(f"divisions must be at least 1, got {divisions}")

        start_hue = self.input_hue
        divided = self._divide_wheel(start_hue, divisions)

        answers = [start_hue]
        ccw_count = (count - 1) // 2
        for i in range(1, ccw_count + 1):
            answers.insert(0, divided[-i % len(divided)])
        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(divided[i % len(divided)])
        return answers

    def _divide_wheel(self, start_hue: int, divisions: int) -> list[int]:
        """
        Split the wheel into ``divisions`` steps of equal temperature change,
        starting at ``start_hue`` and walking clockwise.
        """
        if self.temp_range == 0.0:
            # Only one color exists at this chroma and tone
            return [start_hue] * divisions

        last_temp = self.relative_temperature(start_hue)
        absolute_total_temp_delta = 0.0
        for i in range(360):
            temp = self.relative_temperature(sanitize_degrees_int(start_hue + i))
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        all_hues = [start_hue]
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.relative_temperature(start_hue)
        hue_addend = 1
        while len(all_hues) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            temp = self.relative_temperature(hue)
            total_temp_delta += abs(temp - last_temp)

            # Keep adding this hue while its cumulative delta covers the next
            # index. Needed when fewer than `divisions` hues are temp_step apart.
            desired_total_temp_delta = len(all_hues) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta
            index_addend = 1
            while index_satisfied and len(all_hues) < divisions:
                all_hues.append(hue)
                desired_total_temp_delta = (len(all_hues) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_hues) < divisions:
                    all_hues.append(hue)
                break
        return all_hues
