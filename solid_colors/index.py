"""
Tile index kept next to the emitted images.

`.mosaic_index` is a JSON object mapping each tile's file name to the md5 of
its bytes and its average color, so a photomosaic builder can pick tiles by
color without decoding them. Average colors come from the fill color each
tile was written with.
"""
import hashlib
import json
from json import JSONDecodeError
from pathlib import Path
from typing import Any, Dict, Mapping, Tuple, Union

INDEX_FILENAME = ".mosaic_index"

Rgb = Tuple[int, int, int]


def file_md5(path: Union[str, Path]) -> str:
    return hashlib.md5(Path(path).read_bytes()).hexdigest()


def index_path(out_dir: Union[str, Path]) -> Path:
    return Path(out_dir) / INDEX_FILENAME


def load_index(out_dir: Union[str, Path]) -> Dict[str, Dict[str, Any]]:
    """Load the index in `out_dir`; a missing index is empty."""
    p = index_path(out_dir)
    if not p.exists():
        return {}
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except JSONDecodeError as e:
        raise ValueError(f"Error parsing tile index '{p}': {e.msg} (line {e.lineno} col {e.colno})") from e
    if not isinstance(data, dict):
        raise ValueError(f"Tile index must contain a top-level JSON object: {p}")
    return data


def save_index(out_dir: Union[str, Path], index: Mapping[str, Dict[str, Any]]) -> Path:
    p = index_path(out_dir)
    with open(p, "w", encoding="utf-8") as f:
        json.dump(dict(sorted(index.items())), f, indent=2)
    return p


def update_index(out_dir: Union[str, Path], written: Mapping[Union[str, Path], Rgb]) -> Dict[str, Dict[str, Any]]:
    """Record freshly written tiles and drop stale entries, then save.

    Entries whose file is gone, or whose bytes no longer match the recorded
    hash, are removed; their average color cannot be known without decoding.
    """
    out_dir = Path(out_dir)
    index = {}
    for name, entry in load_index(out_dir).items():
        tile = out_dir / name
        if tile.is_file() and file_md5(tile) == entry.get("hash"):
            index[name] = entry
    for path, rgb in written.items():
        path = Path(path)
        index[path.name] = {"hash": file_md5(path), "average": [int(c) for c in rgb]}
    save_index(out_dir, index)
    return index


def closest_tile(index: Mapping[str, Dict[str, Any]], rgb: Rgb) -> str:
    """Return the file name whose average color is nearest `rgb` (squared RGB distance).

    Ties go to the first name in sorted order.
    """
    if not index:
        raise ValueError("Tile index is empty")

    def _distance(name):
        avg = index[name]["average"]
        return sum((int(a) - int(b)) ** 2 for a, b in zip(avg, rgb))

    return min(sorted(index), key=_distance)
