"""
Command modules, one package per API area.
"""
