"""Streamlit rendering helpers."""
