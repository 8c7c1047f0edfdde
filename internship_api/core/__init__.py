"""
Core module - settings and the error taxonomy.
"""
