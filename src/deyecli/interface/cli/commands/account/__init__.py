"""
Account commands: token acquisition.
"""
