import os
from datetime import timedelta
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

class Config:
    SECRET_KEY = os.getenv("SESSION_SECRET", "super secret session key")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///africash.db")

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "http://localhost:5000")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # the signed cookie only carries the opaque token of a user_sessions row
    SESSION_COOKIE_NAME = "africash.sid"
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = "Lax"
    SESSION_LIFETIME = timedelta(days=int(os.getenv("SESSION_LIFETIME_DAYS", 7)))
    PERMANENT_SESSION_LIFETIME = SESSION_LIFETIME
    SESSION_TABLE_AUTOCREATE = True

    # task id -> reward paid once the ad timer completes
    TASK_REWARDS = {
        "diamond_1": {"title": "Publicité Bronze", "reward": Decimal("0.05"), "duration": 5},
        "diamond_2": {"title": "Publicité Argent", "reward": Decimal("0.10"), "duration": 10},
        "diamond_3": {"title": "Publicité Or", "reward": Decimal("0.30"), "duration": 30},
        "gagner": {"title": "Super Bonus", "reward": Decimal("0.50"), "duration": 60},
    }
    # unknown task ids are credited with the amount the client reports
    TRUST_CLIENT_REWARD_AMOUNT = os.getenv("TRUST_CLIENT_REWARD_AMOUNT", "true").lower() == "true"

    WITHDRAWAL_METHODS = ("orange", "mtn", "moov", "wave")
    MIN_WITHDRAWAL_AMOUNT = Decimal(os.getenv("MIN_WITHDRAWAL_AMOUNT", "0.01"))

class DevelopmentConfig(Config):
    DEBUG = True

class ProductionConfig(Config):
    DEBUG = False
    SESSION_COOKIE_SECURE = True

class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    LOG_LEVEL = "WARNING"
    BCRYPT_LOG_ROUNDS = 4
