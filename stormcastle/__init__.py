"""Castle-storming arcade game drawn on a simulated Nokia 5110 LCD."""

__version__ = "0.1.0"
__all__ = ["__version__"]