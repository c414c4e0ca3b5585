"""
Render solid-color images and write them as PNG files.

Colors are resolved with Pillow's `ImageColor` (CSS/HTML name table and
`hsl()` strings); pixels are filled with numpy and encoded by Pillow.
"""
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
from PIL import Image, ImageColor

from .logger import MessageLogger, WriteLogger
from .palette import ColorSpec, HslColor, NamedColor, color_stem


class InvalidColorName(ValueError):
    """A named color is not in the resolver's name table."""


@dataclass(frozen=True)
class ImageSpec:
    width: int
    height: int
    fill: ColorSpec


def _fixed(value) -> str:
    # Pillow's hsl() pattern accepts plain decimals only (no exponent)
    return f"{value:.10f}"


def _hsl_string(color: HslColor) -> str:
    return f"hsl({_fixed(color.hue)},{_fixed(color.saturation * 100)}%,{_fixed(color.lightness * 100)}%)"


def resolve_rgb(spec: ColorSpec) -> Tuple[int, int, int]:
    if isinstance(spec, NamedColor):
        try:
            return ImageColor.getrgb(spec.name)[:3]
        except ValueError as e:
            raise InvalidColorName(f"Unknown color name: '{spec.name}'") from e
    if isinstance(spec, HslColor):
        return ImageColor.getrgb(_hsl_string(spec))[:3]
    raise TypeError(f"Unsupported color spec: {spec!r}")


def make_fill_buffer(width: int, height: int, rgb: Tuple[int, int, int]) -> np.ndarray:
    """Return an opaque (height, width, 4) uint8 RGBA buffer filled with `rgb`."""
    if width < 1 or height < 1:
        raise ValueError(f"Image size must be positive, got {width}x{height}")
    arr = np.empty((height, width, 4), dtype=np.uint8)
    arr[:, :, :3] = rgb
    arr[:, :, 3] = 255
    return arr


def render_image(image_spec: ImageSpec) -> Image.Image:
    rgb = resolve_rgb(image_spec.fill)
    return Image.fromarray(make_fill_buffer(image_spec.width, image_spec.height, rgb))


def output_path(out_dir: Union[str, Path], spec: ColorSpec) -> Path:
    return Path(out_dir) / f"{color_stem(spec)}.png"


def find_collisions(paths: Iterable[Path]) -> Dict[Path, int]:
    """Return the paths that occur more than once, with their counts."""
    return {p: n for p, n in Counter(paths).items() if n > 1}


def emit_images(
    specs: Iterable[ColorSpec],
    out_dir: Union[str, Path],
    width: int,
    height: int,
    *,
    dry_run: bool = False,
    write_logger: Optional[WriteLogger] = None,
    msg_logger: Optional[MessageLogger] = None,
) -> List[Path]:
    """Write one `width` x `height` PNG per color spec into `out_dir`.

    Files are written in order and one `wrote <path>` line is printed per
    file. The first failure propagates; files already written are kept.
    Duplicate output paths are reported as warnings and the later write
    overwrites the earlier one.

    Returns the list of paths written (or that would be written on a dry run).
    """
    specs = list(specs)
    out_dir = Path(out_dir)
    paths = [output_path(out_dir, s) for s in specs]

    for p, n in find_collisions(paths).items():
        message = f"{p} is produced by {n} colors; later writes overwrite earlier ones"
        print(f"WARN: {message}", file=sys.stderr)
        if msg_logger is not None:
            msg_logger.log("WARN", message)

    if dry_run:
        for p in paths:
            print(f"would write {p}")
        return paths

    if specs:
        out_dir.mkdir(parents=True, exist_ok=True)
    for spec, p in zip(specs, paths):
        img = render_image(ImageSpec(width, height, spec))
        img.save(p, "PNG")
        print(f"wrote {p}")
        if write_logger is not None:
            write_logger.log(color_stem(spec), p, width, height)
    return paths
