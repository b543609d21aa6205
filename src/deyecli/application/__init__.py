"""
Application layer: dependency wiring shared by all commands.
"""
