"""Implementation modules behind the flat ``numgeo`` import surface."""
