# server/models/user.py

from sqlalchemy import Column, String
from . import Base


# -------------------------------
# User Model
# -------------------------------

class User(Base):
    """
    Database model for application users.
    Stores the normalized username and the password as submitted.
    """
    __tablename__ = "users"

    username = Column(String, primary_key=True, index=True, nullable=False)
    password = Column(String, nullable=False)
