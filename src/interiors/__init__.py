"""Zone-tree layout and part generation for cabinet interiors."""

__version__ = "0.1.0"
