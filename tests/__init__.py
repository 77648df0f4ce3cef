"""
Test Suite for Recommendation Pipeline.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Gather-then-apply runs across components

Running Tests:
    pytest tests/                                   # All tests
    pytest tests/unit/                              # Unit tests only
    pytest --cov=src/recommendation_pipeline        # With coverage
"""
