"""
TF-IDF search module for information retrieval using the TF-IDF weighting scheme.
Ranks documents by cosine similarity between query and document vectors.
"""
