"""
Recommender toolkit helpers: component graph labels, the gradient-descent
SVD configuration module and the top-N MRR metric.
"""

__version__ = "0.1.0"
