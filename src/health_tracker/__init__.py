"""Personal body-weight and exercise tracker."""

__version__ = "0.1.0"
