"""GUI-agnostic conversion engine: rewriter, title mapping and link resolution."""
