"""
Streamlit session helpers.
"""
