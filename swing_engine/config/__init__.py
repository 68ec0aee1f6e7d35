"""
Configuration for the swing engine.
"""
