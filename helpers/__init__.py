"""Pure computation helpers."""
