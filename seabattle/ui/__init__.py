"""Frontend-neutral layout and hit-testing."""
