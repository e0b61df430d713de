"""Domain models and entities.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP or the CLI: only the shapes of the data.
"""
