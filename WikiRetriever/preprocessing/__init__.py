"""
Preprocessing module for text processing in information retrieval tasks.
Includes the document model and the tokenizer (lowercasing, punctuation stripping, splitting).
"""
