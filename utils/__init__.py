"""Shared utilities for the drawing application."""
