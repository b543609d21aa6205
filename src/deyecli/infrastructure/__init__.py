"""
Infrastructure layer: config file persistence, HTTP transport, logging.
"""
