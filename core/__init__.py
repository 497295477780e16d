"""core package initialization.

Making `core` an explicit package so imports like `import core.app`
work reliably when running `main.py` from the project root.
"""

__all__ = ["app", "collision", "constants", "events", "save", "scene", "tuning"]
