"""I/O utilities."""

from tweetnorm.io.export import OutputFormat, render, to_json, to_text, write_output

__all__ = ["OutputFormat", "render", "to_json", "to_text", "write_output"]
