"""Terminal views that drive a PuzzleState."""
