"""Weather data analyzer: CSV observations in, descriptive statistics out."""

__version__ = "1.0.0"
