"""EcoRoute: fuzzy energy and charging estimation for electric-vehicle routes."""

__version__ = "0.1.0"
