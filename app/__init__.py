# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App factory, middleware order, route mounting
# - middleware.py: Request logging and path-scoped credential gates
# - exceptions.py: Error envelope, error classification and handlers
# - config.py: Environment variable loading and settings
# - auth/: Admin session tokens and API key verification
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# business logic to the core/ package.
# =============================================================================
