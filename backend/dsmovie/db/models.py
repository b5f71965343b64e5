from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey, Table
from sqlalchemy.orm import relationship
from dsmovie.db.database import Base

user_role = Table(
    "tb_user_role",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("tb_user.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("tb_role.id", ondelete="CASCADE"), primary_key=True),
)


class UserORM(Base):
    __tablename__ = "tb_user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    username = Column(String, unique=True, index=True, nullable=False)
    password = Column(String, nullable=False)

    roles = relationship("RoleORM", secondary=user_role)
    scores = relationship("ScoreORM", back_populates="user")


class RoleORM(Base):
    __tablename__ = "tb_role"

    id = Column(Integer, primary_key=True, index=True)
    authority = Column(String, unique=True, nullable=False)


class MovieORM(Base):
    __tablename__ = "tb_movie"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    image = Column(String, nullable=False)
    score_sum = Column(Float, nullable=False, default=0.0)
    count = Column(Integer, nullable=False, default=0)

    scores = relationship("ScoreORM", back_populates="movie", passive_deletes="all")


class ScoreORM(Base):
    __tablename__ = "tb_score"

    id = Column(Integer, primary_key=True, index=True)
    movie_id = Column(Integer, ForeignKey("tb_movie.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("tb_user.id"), nullable=False, index=True)
    value = Column(Float, nullable=False)
    timestamp = Column(DateTime(timezone=True))

    user = relationship("UserORM", back_populates="scores")
    movie = relationship("MovieORM", back_populates="scores")
