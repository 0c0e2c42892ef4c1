"""
sqlizer

Generates Go types from SQL Server table metadata.
"""

__version__ = "0.1.0"
