from sqlalchemy.ext.declarative import declarative_base

Base = declarative_base()

from .signup import Signup as Signup  # noqa: E402
