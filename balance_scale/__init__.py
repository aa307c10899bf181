"""Balance Scale: income versus expenses tracker."""

__version__ = "0.1.0"
