"""Modal terminal text editor: buffer core, modes, and a Textual host."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "errors",
    "modes",
    "runtime",
]

__version__ = "0.1.0"
