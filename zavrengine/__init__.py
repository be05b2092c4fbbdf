"""Core of a small 3D engine: vectors and matrices, GJK/EPA collision, a stopwatch and a message packet."""

__version__ = "0.1.0"