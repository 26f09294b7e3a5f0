"""Meowa: browse and search cat breeds from TheCatAPI."""
