"""
Target language implementations.
"""
