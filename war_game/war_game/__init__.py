"""War card game simulator."""
