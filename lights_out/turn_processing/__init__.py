"""Selection processing helpers.

This package centralizes key validation so every keypress flows through the
same pipeline and shows up consistently in the logs.
"""
