# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the PasteDrop API:
# - test_dispatch.py: Pipeline order, gates, error and not-found handling
# - test_cors.py: CORS preflight and response headers
# - test_exceptions.py: Error envelope and classification
# - test_auth.py: Admin sessions, API keys and the file gates
# - test_pastes.py / test_files.py: Route group behavior
# - test_models.py: Unit tests for Pydantic model validation and helpers
#
# Run tests with: pytest
# =============================================================================
