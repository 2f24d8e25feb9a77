"""
Core functionality for the MindCanvas application.

This package contains modules for analyzing YouTube videos with a
search-grounded model, rendering infographics, and sequencing the two.
"""
