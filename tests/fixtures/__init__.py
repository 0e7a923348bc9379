"""
Test fixtures for the review sentiment demo.

Contains sample data for testing:
- reviews_small.tsv: three data rows, one of them with blank text
"""
