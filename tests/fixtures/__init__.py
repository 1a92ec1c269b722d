"""
Test Fixtures and Utilities

Synthetic driver records for integration tests. All data is synthetic.
"""
