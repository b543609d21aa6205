"""
Device commands.
"""
