"""Two integer stacks with push-swap instructions, rank indexing and helpers."""

__version__ = "0.1.0"