"""Algorithms, parallel experiments, resource management, expression templates and IPC demos."""

__version__ = "0.1.0"