from __future__ import annotations

from .corpus import generate_sample_files, split_records

__all__ = ["generate_sample_files", "split_records"]
