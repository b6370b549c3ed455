import datetime as dt

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class User(Base):
    """Account row as laid out by the game's `adduser` procedure."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column("ID", Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(32), unique=True)
    passwd: Mapped[str] = mapped_column(String(64))
    prompt: Mapped[str] = mapped_column(String(32), default="")
    answer: Mapped[str] = mapped_column(String(32), default="")
    truename: Mapped[str] = mapped_column(String(32), default="")
    idnumber: Mapped[str] = mapped_column(String(32), default="")
    email: Mapped[str] = mapped_column(String(64), unique=True)
    mobilenumber: Mapped[str] = mapped_column(String(32), default="")
    province: Mapped[str] = mapped_column(String(32), default="")
    city: Mapped[str] = mapped_column(String(32), default="")
    phonenumber: Mapped[str] = mapped_column(String(32), default="")
    address: Mapped[str] = mapped_column(String(64), default="")
    postalcode: Mapped[str] = mapped_column(String(8), default="")
    gender: Mapped[int | None] = mapped_column(Integer, nullable=True)
    birthday: Mapped[dt.datetime | None] = mapped_column(DateTime, nullable=True)
    qq: Mapped[str] = mapped_column(String(32), default="")
    passwd2: Mapped[str] = mapped_column(String(64))
    creatime: Mapped[dt.datetime] = mapped_column(DateTime, server_default=func.now())
