"""Streamlit components for the task board UI"""
