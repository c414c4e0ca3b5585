"""
Helpers to load and validate JSON configuration files for the generators.
"""
import json
from pathlib import Path
from typing import Dict, Any, NamedTuple
from json import JSONDecodeError


class Profile(NamedTuple):
    width: int
    height: int
    out_dir: str


# Dimension/output profiles; passed explicitly into the emitter
PROFILES: Dict[str, Profile] = {
    "color_images": Profile(16, 16, "color_images"),
    "images": Profile(8, 8, "images"),
    "sweep": Profile(16, 16, "sample/solid_colors"),
}


def get_profile(name: str) -> Profile:
    try:
        return PROFILES[name]
    except KeyError:
        raise KeyError(f"Unknown profile: '{name}' (expected one of {', '.join(PROFILES)})") from None


def load_config(path: str) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(p, "r", encoding="utf-8") as f:
        text = f.read()
        if not text.strip():
            raise ValueError(f"Config file is empty: {path}")
        # Accept files wrapped in Markdown code fences (```json ... ```)
        s = text.strip()
        if s.startswith("```"):
            lines = s.splitlines()
            if len(lines) >= 3 and lines[0].startswith("```") and lines[-1].startswith("```"):
                s = "\n".join(lines[1:-1])
            else:
                s = s.lstrip("`").rstrip("`")
        try:
            cfg = json.loads(s)
        except JSONDecodeError as e:
            raise ValueError(f"Error parsing JSON config '{path}': {e.msg} (line {e.lineno} col {e.colno})") from e
    if not isinstance(cfg, dict):
        raise ValueError("Config file must contain a top-level JSON object")
    return cfg


def validate_config(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """
    Small validator for the keys the generators read.

    Returns cfg (unchanged) or raises ValueError.
    """
    for key in ("width", "height"):
        if key in cfg:
            v = cfg[key]
            # bool is an int subclass; reject it explicitly
            if not isinstance(v, int) or isinstance(v, bool) or v < 1:
                raise ValueError(f"Config '{key}' must be an integer >= 1")
    for key in ("out_dir", "log_dir", "colors_file"):
        if key in cfg and (not isinstance(cfg[key], str) or not cfg[key].strip()):
            raise ValueError(f"Config '{key}' must be a non-empty string path")
    if "colors" in cfg:
        colors = cfg["colors"]
        if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
            raise ValueError("Config 'colors' must be a list of color name strings")
    for key in ("dry_run", "index"):
        if key in cfg and not isinstance(cfg[key], bool):
            raise ValueError(f"Config '{key}' must be true or false")

    if "out_dir" in cfg:
        # Directory may not exist yet, but nothing on the way may be a regular file.
        p = Path(cfg["out_dir"])
        for parent in (p, *p.parents):
            if parent.exists():
                if not parent.is_dir():
                    raise ValueError(f"out_dir is not a directory: {cfg['out_dir']}")
                break

    return cfg
