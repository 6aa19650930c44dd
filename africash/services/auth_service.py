import logging

from africash.services import user_service
from africash.services.session_service import session_store
from africash.utils.auth_utils import hash_password, check_password, password_too_long
from africash.utils.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"

_dummy_hash = None


def _unknown_user_check(password):
    # burn the same bcrypt cost as a real check so timing does not reveal unknown emails
    global _dummy_hash
    if _dummy_hash is None:
        _dummy_hash = hash_password("not-a-real-password")
    check_password(password, _dummy_hash)


def register_user(name, email, phone, password, referral_code=None):
    user = user_service.create_user(
        name=name,
        email=email,
        phone=phone,
        password_hash=hash_password(password),
        referral_code=referral_code,
    )
    session_store.start(user)
    logger.info("Registered user id=%s", user.id)
    return user


def authenticate_user(email, password):
    # no stored hash can match a password bcrypt refuses to hash
    if password_too_long(password):
        raise AuthenticationError(INVALID_CREDENTIALS)

    user = user_service.get_user_by_email(email)
    if not user:
        _unknown_user_check(password)
        raise AuthenticationError(INVALID_CREDENTIALS)
    if not check_password(password, user.password_hash):
        raise AuthenticationError(INVALID_CREDENTIALS)
    return user


def login_user(email, password):
    try:
        user = authenticate_user(email, password)
    except AuthenticationError:
        logger.info("Failed login attempt")
        raise
    session_store.start(user)
    logger.info("User id=%s logged in", user.id)
    return user


def logout_user():
    session_store.end()
