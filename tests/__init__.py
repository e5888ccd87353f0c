"""
Test Suite for finledger

Test Structure:
- fixtures/: Shared test data and builders
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and configuration tests

Test Data:
All test data is synthetic. Real financial data is never included in tests.
"""
