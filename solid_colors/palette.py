"""
Color specifications for the solid-color generators.

Two sources are supported:
- named colors given as tokens (command line or a TSV file), upper-cased;
- a fixed sweep over hue/saturation/lightness plus black and white.
"""
import csv
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

Number = Union[int, float]

HUE_STEP = 32
HUE_COUNT = 8
SATURATIONS: Tuple[float, ...] = (0.20, 0.4, 0.6, 0.8, 1.0)
LIGHTNESSES: Tuple[float, ...] = (0.20, 0.4, 0.6, 0.8, 0.9)


@dataclass(frozen=True)
class NamedColor:
    name: str


@dataclass(frozen=True)
class HslColor:
    """HSL triple; hue in degrees, saturation and lightness as fractions.

    Components keep the numeric type they were created with, which decides
    how they render in filenames (see `format_component`).
    """
    hue: Number
    saturation: Number
    lightness: Number


ColorSpec = Union[NamedColor, HslColor]

# appended after the sweep: black, then white (lightness 1 ignores hue/saturation)
EXTRA_COLORS: Tuple[HslColor, ...] = (HslColor(0, 0, 0), HslColor(0, 1, 1))


def named_colors(tokens: Iterable[str]) -> List[NamedColor]:
    return [NamedColor(t.upper()) for t in tokens]


def hsl_sweep() -> List[HslColor]:
    colors = [
        HslColor(h * HUE_STEP, s, l)
        for h in range(HUE_COUNT)
        for s in SATURATIONS
        for l in LIGHTNESSES
    ]
    colors.extend(EXTRA_COLORS)
    return colors


def format_component(value: Number) -> str:
    """Render one HSL component for a filename.

    Integers render without a decimal point and floats use Python's shortest
    round-trip form, so 0 -> "0", 0.2 -> "0.2" and 1.0 -> "1.0".
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"HSL component must be int or float, got {type(value).__name__}")
    return repr(value)


def color_stem(spec: ColorSpec) -> str:
    if isinstance(spec, NamedColor):
        return spec.name
    if isinstance(spec, HslColor):
        return "_".join(format_component(v) for v in (spec.hue, spec.saturation, spec.lightness))
    raise TypeError(f"Unsupported color spec: {spec!r}")


def load_color_tokens(tsv_path: Union[str, Path]) -> List[str]:
    """Load color name tokens from a TSV with a header row.

    The `name` column is used when present, otherwise the first column.
    Rows with an empty name are skipped.
    """
    p = Path(tsv_path)
    if not p.exists():
        raise FileNotFoundError(f"Color TSV not found: {tsv_path}")

    out: List[str] = []
    with p.open("r", encoding="utf-8", newline="") as fh:
        reader = csv.DictReader(fh, delimiter="\t")
        if reader.fieldnames is None:
            raise ValueError("Color TSV must have a header row (e.g. a 'name' column)")
        column = reader.fieldnames[0]
        for field in reader.fieldnames:
            if field.strip().lower() == "name":
                column = field
                break
        for row in reader:
            token = (row.get(column) or "").strip()
            if token:
                out.append(token)
    return out
