"""Runtime values, environments, builtins and standard library for the G scripting language."""

__version__ = "2.0.1"