"""Hashed LRU tracking of file names and collection of distinct integers from text files."""

__version__ = "0.1.0"
__all__ = ["lru_manager", "unique_ints"]