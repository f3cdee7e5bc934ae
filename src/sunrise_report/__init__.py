"""Sunrise/sunset reporter for scripting and automation."""

__version__ = "0.1.0"
