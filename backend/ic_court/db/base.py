import datetime

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)
