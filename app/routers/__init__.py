# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# Route groups mounted onto the application root by app.main.create_app():
#
# Mounted as routers:
# - admin.py: Admin login/logout/password
# - api_keys.py: API key management
# - admin_pastes.py: Paste administration
# - user_pastes.py: Paste creation and public reading
# - storage_configs.py: S3-compatible storage configs
# - system.py: System settings and dashboard stats
#
# Mounted through register_*_routes(app):
# - admin_files.py, user_files.py, upload.py, file_view.py
#
# health.py is always mounted.
# =============================================================================

from . import health
from . import admin
from . import api_keys
from . import admin_pastes
from . import user_pastes
from . import storage_configs
from . import system
from .admin_files import ADMIN_FILES_PREFIX, register_admin_files_routes
from .user_files import USER_FILES_PREFIX, register_user_files_routes
from .upload import register_upload_routes
from .file_view import register_file_view_routes

__all__ = [
    "health",
    "admin",
    "api_keys",
    "admin_pastes",
    "user_pastes",
    "storage_configs",
    "system",
    "ADMIN_FILES_PREFIX",
    "USER_FILES_PREFIX",
    "register_admin_files_routes",
    "register_user_files_routes",
    "register_upload_routes",
    "register_file_view_routes",
]
