"""Pure game logic: grids, fleet generation, and mark tracking."""
