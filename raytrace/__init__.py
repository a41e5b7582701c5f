"""A small ray tracer that renders plain-text scene scripts to raw RGB images."""

__version__ = "0.1.0"