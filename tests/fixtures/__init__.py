"""
Test Fixtures and Utilities

Shared test data and builders for the ledger test suite.

All test data is synthetic and does not contain real financial information.
"""
