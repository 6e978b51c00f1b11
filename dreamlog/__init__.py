"""
Core modules for the Dream Journal Analytics tool.

This package contains the functionality for:
- Dream and sleep record models
- Text analysis of dream content
- Dream, sleep and reality check statistics
- Calendar and chart generation
- Report generation
"""
