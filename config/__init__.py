"""
Configuration Package

Settings loaded from the environment (.env) in config/settings.py.
"""
