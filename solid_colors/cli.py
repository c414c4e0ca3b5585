"""
Command-line entry points for the solid-color generators.

Usage examples:
color-images red Blue          # 16x16 -> color_images/RED.png, color_images/BLUE.png
tile-images red green          # 8x8   -> images/RED.png, images/GREEN.png
solid-color-sweep              # 16x16 -> sample/solid_colors/<h>_<s>_<l>.png (202 files)

CLI options override keys from --config, which override the profile defaults.
"""
import argparse
import sys
from contextlib import ExitStack
from pathlib import Path
from typing import List, Optional

from .config import get_profile, load_config, validate_config
from .emitter import emit_images, resolve_rgb
from .index import index_path, update_index
from .logger import MessageLogger, WriteLogger
from .palette import ColorSpec, hsl_sweep, load_color_tokens, named_colors


def build_parser(description: str, named: bool) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    if named:
        parser.add_argument("colors", nargs="*", help="Color names (case-insensitive), one image per name")
        parser.add_argument("--colors_file", default=None, help="TSV file with a 'name' column; names are appended after positional colors")
    parser.add_argument("--config", help="Path to JSON config file. If provided, CLI args override config keys.")
    parser.add_argument("--out_dir", default=None, help="Directory to write PNG files into")
    parser.add_argument("--width", type=int, default=None, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=None, help="Image height in pixels")
    parser.add_argument("--log_dir", default=None, help="Directory for TSV write/message logs (optional)")
    parser.add_argument("--dry_run", action="store_true", default=None, help="Print the paths that would be written without writing")
    parser.add_argument("--index", action="store_true", default=None, help="Record hash and average color of each tile in <out_dir>/.mosaic_index")
    return parser


def run_task(
    specs: List[ColorSpec],
    out_dir: str,
    width: int,
    height: int,
    log_dir: Optional[str] = None,
    dry_run: bool = False,
    index: bool = False,
) -> List[Path]:
    if width < 1 or height < 1:
        raise ValueError(f"width and height must be positive, got {width}x{height}")
    with ExitStack() as stack:
        write_logger = msg_logger = None
        if log_dir:
            write_logger = stack.enter_context(WriteLogger(log_dir))
            msg_logger = stack.enter_context(MessageLogger(log_dir))
        paths = emit_images(
            specs,
            out_dir,
            width,
            height,
            dry_run=dry_run,
            write_logger=write_logger,
            msg_logger=msg_logger,
        )
    if index and paths and not dry_run:
        # later duplicates win, matching the file left on disk
        tiles = update_index(out_dir, {p: resolve_rgb(s) for s, p in zip(specs, paths)})
        print(f"indexed {len(tiles)} tiles in {index_path(out_dir)}")
    return paths


def _main(profile_name: str, description: str, named: bool, argv: Optional[List[str]] = None):
    args = build_parser(description, named).parse_args(argv)
    profile = get_profile(profile_name)

    try:
        cfg = {}
        if args.config:
            cfg = load_config(args.config)
            validate_config(cfg)

        def _get(name, default=None):
            val = getattr(args, name, None)
            if val is not None:
                return val
            return cfg.get(name, default)

        if named:
            tokens = list(args.colors) or list(cfg.get("colors", []))
            colors_file = _get("colors_file")
            if colors_file:
                tokens.extend(load_color_tokens(colors_file))
            specs = named_colors(tokens)
        else:
            specs = hsl_sweep()

        run_task(
            specs,
            out_dir=_get("out_dir", profile.out_dir),
            width=int(_get("width", profile.width)),
            height=int(_get("height", profile.height)),
            log_dir=_get("log_dir"),
            dry_run=bool(_get("dry_run", False)),
            index=bool(_get("index", False)),
        )
    except Exception as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)


def color_images_main(argv: Optional[List[str]] = None):
    _main("color_images", "Write a 16x16 solid-color PNG per color name into color_images/", True, argv)


def tile_images_main(argv: Optional[List[str]] = None):
    _main("images", "Write an 8x8 solid-color PNG per color name into images/", True, argv)


def sweep_main(argv: Optional[List[str]] = None):
    _main("sweep", "Write 16x16 PNGs for a fixed hue/saturation/lightness sweep into sample/solid_colors/", False, argv)
