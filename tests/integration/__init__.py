"""Integration test package.

These tests run the whole strategy-building workflow, from a naive-search
corpus to the rendered Boolean searches, on small in-memory corpora.
"""
