"""
Document source: fetches Wikipedia articles and turns them into a corpus.
"""
