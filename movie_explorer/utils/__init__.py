"""
Process-level helpers shared by the Streamlit page and scripts.
"""

from movie_explorer.utils.logging_config import (
    configure_script_logging,
    configure_ui_logging,
    setup_logging,
)

__all__ = ['configure_script_logging', 'configure_ui_logging', 'setup_logging']
