"""
Interview Prep Assistant.
"""
__version__ = "1.0.0"
