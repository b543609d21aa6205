"""
Interface layer: the command-line entry points.
"""
