"""Admin backend registering projects and the APIs attached to them."""

__version__ = "1.0.0"
