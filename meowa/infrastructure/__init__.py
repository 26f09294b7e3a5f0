"""Infrastructure layer: IO and integration code (TheCatAPI client)."""
