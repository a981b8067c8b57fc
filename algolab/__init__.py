"""Data-structure and algorithm exercises: red-black trees, hash tables and band matrices."""

__version__ = "0.1.0"
__all__ = [
    "rbtree",
    "rbt_cli",
    "hashing",
    "hashtables",
    "benchmark",
    "band_bounds",
    "band_search",
]