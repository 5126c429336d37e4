"""
Promote a user to admin by email.
Usage: python -m jobboard.scripts.promote_admin user@example.com
"""
import sys

from jobboard.config import settings
from jobboard.database import build_engine, build_session_factory, init_db
from jobboard.repos.user_repo import get_by_email, update


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m jobboard.scripts.promote_admin <email>")
        sys.exit(1)
    email = sys.argv[1].strip()
    engine = build_engine(settings.database_url)
    init_db(engine)
    db = build_session_factory(engine)()
    try:
        user = get_by_email(db, email)
        if not user:
            print(f"User not found: {email}")
            sys.exit(1)
        update(db, user.id, is_admin=True)
        print(f"Promoted {email} to admin.")
    finally:
        db.close()
        engine.dispose()


if __name__ == "__main__":
    main()
