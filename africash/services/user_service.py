import logging
from decimal import Decimal

from sqlalchemy.exc import IntegrityError

from africash.extensions import db
from africash.models.user import User
from africash.utils.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def get_user_by_id(user_id):
    return db.session.get(User, user_id)


def get_user_by_email(email):
    return User.query.filter_by(email=email).first()


def get_user_for_update(user_id):
    user = (
        User.query
        .filter_by(id=user_id)
        .with_for_update()
        .first()
    )
    if not user:
        raise NotFoundError("User not found")
    return user


def create_user(name, email, phone, password_hash, referral_code=None):
    # the unique index on users.email decides duplicates, not a pre-check
    user = User(
        name=name,
        email=email,
        phone=phone,
        password_hash=password_hash,
        referral_code=referral_code,
        balance=Decimal("0.00"),
        is_activated=False,
    )
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise ConflictError("Email already exists", field="email")
    logger.info("Created user id=%s", user.id)
    return user


def set_balance(user_id, new_balance):
    """Store ``new_balance`` on the user. Joins the caller's transaction."""
    user = get_user_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    user.balance = new_balance
    db.session.flush()
    return user


def set_activated(user_id, activated=True):
    user = get_user_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    if user.is_activated != activated:
        user.is_activated = activated
        db.session.commit()
    return user
