"""colonsh: colon-prefixed shell aliases and helpers driven by ~/colonsh.json."""

__version__ = "0.1.0"
