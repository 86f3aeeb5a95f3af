"""Render LED strip test patterns and stream them as raw RGB frames over UDP."""

__version__ = "0.1.0"