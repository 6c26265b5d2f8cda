"""Core puzzle primitives (grid model, events, and the game loop).

Kept free of terminal concerns so it can be driven by the CLI and by tests.
"""
