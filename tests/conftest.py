"""Shared pytest fixtures building on-disk cache homes."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def write_bytes(path: Path, size: int) -> Path:
    """Create *path* (and parents) holding exactly *size* bytes."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def cache_home(tmp_path: Path) -> Path:
    """Return a cache home with known sizes in every category.

    git/db:          serde 300+20 and 80 (two mirrors), tokio-rs 1500
    git/checkouts:   serde 50
    registry/src:    libc 2000 and 1000 (two indexes), wasm-bindgen 700 and 900
    registry/cache:  libc 400, serde 100
    """
    home = tmp_path / "cargo-home"
    write_bytes(home / "git" / "db" / "serde-1a2b3c" / "objects" / "pack" / "a.pack", 300)
    write_bytes(home / "git" / "db" / "serde-1a2b3c" / "HEAD", 20)
    write_bytes(home / "git" / "db" / "serde-4d5e6f" / "HEAD", 80)
    write_bytes(home / "git" / "db" / "tokio-rs-0f0f0f" / "packed-refs", 1500)

    write_bytes(home / "git" / "checkouts" / "serde-1a2b3c" / "abc1234" / "src" / "lib.rs", 50)

    github_src = home / "registry" / "src" / "github.com-1ecc6299db9ec823"
    write_bytes(github_src / "wasm-bindgen-0.2.58" / "src" / "lib.rs", 700)
    write_bytes(github_src / "wasm-bindgen-0.2.59" / "src" / "lib.rs", 900)
    write_bytes(github_src / "libc-0.2.66" / "Cargo.toml", 2000)
    write_bytes(home / "registry" / "src" / "index.crates.io-6f17d22bba15001f" / "libc-0.2.70" / "Cargo.toml", 1000)

    github_cache = home / "registry" / "cache" / "github.com-1ecc6299db9ec823"
    write_bytes(github_cache / "libc-0.2.66.crate", 400)
    write_bytes(github_cache / "serde-1.0.104.crate", 100)
    return home


@pytest.fixture
def write_file() -> Callable[[Path, int], Path]:
    """Return the helper that creates files of an exact size."""
    return write_bytes
