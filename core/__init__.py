# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the route groups:
# - models/: Pydantic schemas for data validation
# - services/: In-process stores and rules for pastes, files, API keys,
#   storage configs and system settings
#
# Code in this package should NOT import FastAPI directly; services raise
# the ApiError subclasses from app.exceptions.
# =============================================================================
