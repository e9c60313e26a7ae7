"""
WikiRetriever - a small in-memory information retrieval engine.
Supports boolean (AND/OR/NOT) search and TF-IDF ranked search over a fixed corpus.
"""
