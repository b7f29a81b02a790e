"""Application orchestration between the core and a frontend."""
