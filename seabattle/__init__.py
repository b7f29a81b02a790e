"""Sea Battle companion: fleet placement and hit/miss bookkeeping."""
