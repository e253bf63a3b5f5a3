"""
Streamlit presentation layer for the movie explorer.
"""
