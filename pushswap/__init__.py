"""Sort distinct integers with two stacks and a small instruction set."""

__version__ = "1.0.0"