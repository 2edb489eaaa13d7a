"""A level-based game framework with prototypes, layers, components, render groups and a recording graphics device."""

__version__ = "0.1.0"