"""Project scaffolding CLI for this repo.

The command surface is implemented with Typer and Rich for better help and
error ergonomics, while the copy itself is plain pathlib/shutil work.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
