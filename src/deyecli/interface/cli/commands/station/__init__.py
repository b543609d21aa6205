"""
Station commands.
"""
