from __future__ import annotations

import enum


class UserRole(str, enum.Enum):
    ADMIN = "Admin"
    USER = "User"


class ActivityType(str, enum.Enum):
    # Activity types are free-form strings; these are the ones the backend emits itself.
    LOGIN = "login"
    PDF_DOWNLOAD = "pdf_download"
