"""Ghost Pacer — run against a virtual pacer with GPS-driven audio cues."""

__version__ = "0.1.0"
