"""Small computing experiments: run counting, bit patterns, a hello server, magic squares, interval arithmetic, cubic equations and radix tries."""

__version__ = "0.1.0"