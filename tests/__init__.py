"""
Test Suite for Fleet Finances

Test Structure:
- fixtures/: Synthetic backend responses
- unit/: Unit tests mirroring src/ package structure
- integration/: CLI and cross-stage workflow tests

Test Categories:
- Core utilities (currency, dates, models, config, events)
- Record loading and filtering
- Aggregation, partitioning and breakdowns
- Statements

Test Data:
All test data is synthetic. Real driver data is never included in tests.
"""
