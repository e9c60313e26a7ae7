"""
Boolean search module: flat, left-to-right AND/OR/NOT evaluation over posting sets.
"""
