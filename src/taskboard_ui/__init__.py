"""Streamlit client for the task management API."""
