import argparse
import logging
from pathlib import Path

import pandas as pd
from pydantic import ValidationError
from tqdm import tqdm

from dsmovie.config import SEED_MOVIES_PATH
from dsmovie.db.database import SessionLocal, engine
from dsmovie.db.models import Base, MovieORM, RoleORM, UserORM
from dsmovie.domain.dto import MovieDTO
from dsmovie.service.auth_service import get_password_hash

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ROLES = ["ROLE_CLIENT", "ROLE_ADMIN"]

# default accounts, all with the same password
DEFAULT_PASSWORD = "123456"
DEFAULT_USERS = [
    {"name": "Maria Brown", "username": "maria@gmail.com", "roles": ["ROLE_CLIENT"]},
    {"name": "Alex Green", "username": "alex@gmail.com", "roles": ["ROLE_CLIENT", "ROLE_ADMIN"]},
]


def import_roles_and_users(session_factory=SessionLocal) -> tuple[int, int]:
    """Create the roles and default users that are missing.

    Returns:
        tuple: (roles_added, users_added)
    """
    db_session = session_factory()

    try:
        roles = {}
        roles_added = 0
        for authority in ROLES:
            role = db_session.query(RoleORM).filter(RoleORM.authority == authority).first()
            if role is None:
                role = RoleORM(authority=authority)
                db_session.add(role)
                roles_added += 1
            roles[authority] = role

        users_added = 0
        for entry in DEFAULT_USERS:
            if db_session.query(UserORM).filter(UserORM.username == entry["username"]).first() is not None:
                continue
            db_session.add(UserORM(
                name=entry["name"],
                username=entry["username"],
                password=get_password_hash(DEFAULT_PASSWORD),
                roles=[roles[authority] for authority in entry["roles"]]
            ))
            users_added += 1

        db_session.commit()
        logger.info(f"Identity import summary: {roles_added} roles added, {users_added} users added")
        return roles_added, users_added

    except Exception as e:
        db_session.rollback()
        logger.error(f"Error importing roles and users: {e}")
        raise

    finally:
        db_session.close()


def import_movies_from_csv(csv_path: Path, batch_size: int = 100,
                           session_factory=SessionLocal) -> tuple[int, int, int]:
    """Import movies from a `title,image` CSV file.

    Rows whose title is already stored, or that break the MovieDTO rules
    (title length, http(s) image), are skipped.

    Returns:
        tuple: (added_count, skipped_count, total_count)
    """
    db_session = session_factory()

    try:
        logger.info(f"Reading movies from {csv_path}...")
        movies = pd.read_csv(csv_path)

        initial_count = len(movies)
        movies = movies.dropna(subset=['title', 'image']).drop_duplicates(subset=['title'], keep='first')
        if len(movies) < initial_count:
            logger.info(f"Removed {initial_count - len(movies)} rows with missing or duplicate titles")

        total = len(movies)
        added = 0
        skipped = 0
        batch_counter = 0

        for _, row in tqdm(movies.iterrows(), total=total, desc="Importing movies"):
            try:
                dto = MovieDTO(title=str(row['title']).strip(), image=str(row['image']).strip())
            except ValidationError as e:
                logger.warning(f"Skipping movie row {row['title']!r}: {e.error_count()} invalid field(s)")
                skipped += 1
                continue

            if db_session.query(MovieORM).filter(MovieORM.title == dto.title).first() is not None:
                skipped += 1
                continue

            db_session.add(MovieORM(title=dto.title, image=dto.image, score_sum=0.0, count=0))
            added += 1
            batch_counter += 1

            if batch_counter >= batch_size:
                db_session.commit()
                batch_counter = 0

        if batch_counter > 0:
            db_session.commit()

        logger.info(f"Movie import summary: {added} added, {skipped} skipped, {total} total")
        return added, skipped, total

    except Exception as e:
        db_session.rollback()
        logger.error(f"Error importing movies: {e}")
        raise

    finally:
        db_session.close()


def purge_database():
    """Purge all data from the database."""
    logger.info("Purging database...")
    Base.metadata.drop_all(bind=engine)
    logger.info("Database purged successfully")


def import_all(purge: bool = False, movies_path: Path = SEED_MOVIES_PATH):
    if purge:
        purge_database()

    Base.metadata.create_all(bind=engine)
    import_roles_and_users()
    import_movies_from_csv(movies_path)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the DSMovie database")
    parser.add_argument("--purge", action="store_true", help="drop all tables before importing")
    parser.add_argument("--movies", type=Path, default=SEED_MOVIES_PATH, help="CSV file with title,image columns")
    args = parser.parse_args()

    import_all(purge=args.purge, movies_path=args.movies)
