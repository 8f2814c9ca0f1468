"""
Backend adapters for the supported package managers.
"""
