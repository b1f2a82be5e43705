"""
Data models for source records and their derived aggregates.
"""
