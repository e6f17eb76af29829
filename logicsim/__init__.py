"""Event-driven digital logic simulation with PlantUML output, plus a heap, a stack and linked-list helpers."""

__version__ = "0.1.0"