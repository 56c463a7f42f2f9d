from .io import read_text, split_lines, write_lines

__all__ = ["read_text", "split_lines", "write_lines"]
