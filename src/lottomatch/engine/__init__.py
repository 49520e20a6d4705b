"""Match-counting engine."""
