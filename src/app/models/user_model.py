"""Modelo User para SQLAlchemy ORM."""


from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base


Base = declarative_base()


class UserTable(Base):
    """
    Modelo User para SQLAlchemy ORM.

    La tabla se gestiona fuera del servicio; el modelo solo se usa
    para construir las sentencias.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
