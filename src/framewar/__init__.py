"""framewar: the card game War as a frame-driven state machine."""

__version__ = "0.1.0"
