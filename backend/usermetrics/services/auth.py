from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from usermetrics.core.errors import InvalidCredentialsError, persistence_errors
from usermetrics.core.security import burn_password_check, verify_password
from usermetrics.models.enums import ActivityType
from usermetrics.models.user import User
from usermetrics.services.activity import record_activity
from usermetrics.services.users import active_users

logger = logging.getLogger(__name__)


def authenticate_user(db: Session, email: str, password: str) -> User:
    """
    Unknown email and wrong password fail the same way (and both run one bcrypt check).
    Only successful logins are recorded as activity.
    """
    with persistence_errors(db, "looking up login email"):
        user = active_users(db).filter(User.email == email).first()
    if not user:
        burn_password_check(password)
        logger.warning("Login failed: unknown email")
        raise InvalidCredentialsError()
    if not verify_password(password, user.password):
        logger.warning("Login failed for user %s: wrong password", user.id)
        raise InvalidCredentialsError()

    record_activity(db, user.id, ActivityType.LOGIN.value, "User logged in")
    logger.info("User %s logged in", user.id)
    return user
