"""Value types returned by the engine."""
