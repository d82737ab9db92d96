"""
Test Suite for Spendwise

Test Structure:
- fixtures/: Synthetic transaction and subscription rows
- unit/: Unit tests mirroring the src/spendwise package structure
- integration/: CLI, configuration, and service workflow tests

Test Categories (markers registered in conftest.py):
- currency: Money parsing, arithmetic, and formatting
- aggregation: Time-bucket and category aggregation
- lifecycle: Subscription expiry evaluation
- budget: Monthly budget monitoring

All test data is synthetic.
"""
