"""Logical package names from disambiguated cache entry names."""

from __future__ import annotations

from cachetop.constants.layout import NAME_SEPARATOR


def decode_name(basename: str) -> str:
    """Strip the trailing ``-<disambiguator>`` segment from *basename*.

    ``github.com-1ecc6299db9ec823`` becomes ``github.com`` and
    ``wasm-bindgen-0.2.58`` becomes ``wasm-bindgen``. A basename without any
    separator has no name left and decodes to ``""``.
    """
    segments = basename.split(NAME_SEPARATOR)
    return NAME_SEPARATOR.join(segments[:-1])
