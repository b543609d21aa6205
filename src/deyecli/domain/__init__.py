"""
Domain layer for deyecli.

Pure models and rules: settings, battery parameters, API endpoints and
the error taxonomy. Nothing here performs I/O.
"""
