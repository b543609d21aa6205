"""
Device configuration commands: read config, update battery parameters.
"""
