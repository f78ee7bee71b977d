"""Core module - Configuration, document finder, element class."""
