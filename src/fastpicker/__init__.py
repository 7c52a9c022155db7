"""State coordination for a photo and video picker."""

__version__ = "0.1.0"
