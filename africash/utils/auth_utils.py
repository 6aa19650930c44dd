from africash.extensions import bcrypt

# bcrypt only looks at the first 72 bytes and current releases refuse longer input
MAX_PASSWORD_BYTES = 72


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > MAX_PASSWORD_BYTES


def hash_password(password: str) -> str:
    return bcrypt.generate_password_hash(password).decode("utf-8")


def check_password(password, hashed_password):
    return bcrypt.check_password_hash(hashed_password, password)
