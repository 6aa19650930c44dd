from decimal import Decimal

from africash.main import create_app
from africash.extensions import db
from africash.services import user_service, wallet_service
from africash.utils.auth_utils import hash_password

# -------------------------------------------------------------------
# CONFIG
# -------------------------------------------------------------------

DEMO_USER = {
    "name": "Test User",
    "email": "test@africash.com",
    "phone": "+241 00 00 00 00",
    "password": "password123",
    "referral_code": "REF123",
}

WELCOME_BONUS = Decimal("500.00")

# -------------------------------------------------------------------
# MAIN LOGIC
# -------------------------------------------------------------------

def seed():
    db.create_all()

    if user_service.get_user_by_email(DEMO_USER["email"]):
        print("Database already seeded.")
        return

    print("Seeding database...")
    user = user_service.create_user(
        name=DEMO_USER["name"],
        email=DEMO_USER["email"],
        phone=DEMO_USER["phone"],
        password_hash=hash_password(DEMO_USER["password"]),
        referral_code=DEMO_USER["referral_code"],
    )

    # balance and its ledger entry land together
    wallet_service.grant_bonus(user.id, WELCOME_BONUS, "Welcome Bonus")

    print(f"Database seeded with test user: {DEMO_USER['email']} / {DEMO_USER['password']}")


# -------------------------------------------------------------------
# ENTRY POINT
# -------------------------------------------------------------------

if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        seed()
