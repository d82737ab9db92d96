"""
Test Fixtures and Utilities

Seeded generators for synthetic store rows. All test data is synthetic and
does not contain real financial information.
"""
