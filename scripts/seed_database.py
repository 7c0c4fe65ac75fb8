from treasury.core.config import settings
from treasury.crud.users import ensure_default_admin
from treasury.db.session import SessionLocal, engine
from treasury.models import Base


def main():
    # local/dev convenience; production schemas come from `alembic upgrade head`
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        admin = ensure_default_admin(
            db,
            username=settings.DEFAULT_ADMIN_USERNAME,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            email=settings.DEFAULT_ADMIN_EMAIL,
        )
        print(f"Seed complete. Default administrator: {admin.username} (id={admin.id}).")
    finally:
        db.close()


if __name__ == "__main__":
    main()
