from sqlalchemy.orm import Session
from typing import List, Optional

from dsmovie.domain.models import Role, User, UserDetailsProjection
from dsmovie.db.models import RoleORM, UserORM
from dsmovie.repositories.interface.user_repository import UserRepository
from dsmovie.exceptions.repository import RepositoryOperationException

class SQLAlchemyUserRepo(UserRepository):
    def __init__(self, db: Session):
        self.db = db

    def _to_domain(self, user_orm: UserORM) -> User:
        return User(
            id=user_orm.id,
            name=user_orm.name,
            username=user_orm.username,
            password=user_orm.password,
            roles={Role(id=role.id, authority=role.authority) for role in user_orm.roles}
        )

    def find_by_username(self, username: str) -> Optional[User]:
        """Get a user by username"""
        try:
            user_orm = self.db.query(UserORM).filter(UserORM.username == username).first()
            return self._to_domain(user_orm) if user_orm else None
        except Exception as e:
            raise RepositoryOperationException(f"Failed to get user by username: {str(e)}")

    def search_user_and_roles_by_username(self, username: str) -> List[UserDetailsProjection]:
        """One row per role granted to the user, empty when the username is unknown"""
        try:
            rows = (
                self.db.query(UserORM.username, UserORM.password, RoleORM.id, RoleORM.authority)
                .select_from(UserORM)
                .join(UserORM.roles)
                .filter(UserORM.username == username)
                .order_by(RoleORM.id)
                .all()
            )
            return [
                UserDetailsProjection(
                    username=row[0],
                    password=row[1],
                    role_id=row[2],
                    authority=row[3]
                )
                for row in rows
            ]
        except Exception as e:
            raise RepositoryOperationException(f"Failed to search user and roles: {str(e)}")
