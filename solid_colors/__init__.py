"""
Solid-color PNG generators.

Submodules: `palette` (color specs), `emitter` (render and write PNGs),
`index` (tile hash/average-color index), `config`, `logger` and `cli` (console entry points).
"""
from . import palette, emitter, index, logger, config

__all__ = ["palette", "emitter", "index", "logger", "config"]
