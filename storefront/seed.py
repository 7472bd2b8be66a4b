"""
Seed the database with default categories and an optional admin account

Usage: python -m storefront.seed
"""
import logging
import sys

from storefront.config import Settings
from storefront.database import create_db_engine, create_session_factory, init_db
from storefront.logging_config import setup_logging
from storefront.repositories.category_repository import CategoryRepository
from storefront.repositories.user_repository import UserRepository
from storefront.schemas.category import CategoryCreate
from storefront.services.auth_service import AuthService

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    CategoryCreate(name="Electronics", description="Tech gadgets and devices", icon="fas fa-laptop"),
    CategoryCreate(name="Fashion", description="Clothing and accessories", icon="fas fa-tshirt"),
    CategoryCreate(name="Home & Garden", description="Furniture and decor", icon="fas fa-home"),
    CategoryCreate(name="Sports", description="Fitness and outdoor gear", icon="fas fa-dumbbell"),
    CategoryCreate(name="Books", description="Books and e-readers", icon="fas fa-book"),
]


def seed(settings: Settings) -> dict:
    """
    Insert default rows that are not there yet
    
    Returns:
        Counts of created rows by kind
    """
    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)
    session_factory = create_session_factory(engine)
    created = {"categories": 0, "admins": 0}
    
    db = session_factory()
    try:
        categories = CategoryRepository(db)
        for category in DEFAULT_CATEGORIES:
            if categories.get_by_name(category.name):
                logger.info("Category %s already exists, skipping", category.name)
                continue
            categories.create(category)
            created["categories"] += 1
        
        if settings.SEED_ADMIN_EMAIL and settings.SEED_ADMIN_PASSWORD:
            users = UserRepository(db)
            if users.get_by_email(settings.SEED_ADMIN_EMAIL):
                logger.info("Admin user already exists, skipping")
            elif users.get_by_username(settings.SEED_ADMIN_USERNAME):
                logger.warning("Username %s is taken, no admin created", settings.SEED_ADMIN_USERNAME)
            else:
                AuthService(db, settings).create_user(
                    settings.SEED_ADMIN_USERNAME,
                    settings.SEED_ADMIN_EMAIL,
                    settings.SEED_ADMIN_PASSWORD,
                    role="admin"
                )
                created["admins"] += 1
        else:
            logger.warning("SEED_ADMIN_EMAIL/SEED_ADMIN_PASSWORD not set, no admin created")
    finally:
        db.close()
        engine.dispose()
    
    logger.info("Seeding done: %s", created)
    return created


def main():
    settings = Settings()
    setup_logging(settings.LOG_LEVEL)
    try:
        seed(settings)
    except Exception:
        logger.exception("Seeding failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
