"""
Configuration package: constants and environment-backed settings.
"""
