"""
Movie Explorer application package.

This package contains the catalog query state machine, the catalog client,
the Streamlit presentation layer, and shared utilities.
"""

__version__ = "1.0.0"
