"""Web host for the drawing application."""
