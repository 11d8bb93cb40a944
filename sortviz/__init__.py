"""Terminal animation of bubble, selection and insertion sort."""

__version__ = "0.1.0"