from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import insert, or_, select, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from signup.core.errors import AccountWriteError, DuplicateAccountError
from signup.db.database import Database
from signup.db.models import User

logger = logging.getLogger(__name__)

ADDUSER_CALL = text(
    "CALL adduser(:name1, :passwd1, :prompt1, :answer1, :truename1, :idnumber1, "
    ":email1, :mobilenumber1, :province1, :city1, :phonenumber1, :address1, "
    ":postalcode1, :gender1, :birthday1, :qq1, :passwd21)"
)


@dataclass(frozen=True)
class NewAccount:
    name: str
    email: str
    password_hash: str
    prompt: str = ""
    answer: str = ""
    truename: str = ""
    idnumber: str = ""
    mobilenumber: str = ""
    province: str = ""
    city: str = ""
    phonenumber: str = ""
    address: str = ""
    postalcode: str = ""
    gender: int | None = None
    birthday: datetime | None = None
    qq: str = ""


def adduser_params(account: NewAccount) -> dict[str, Any]:
    # order matches the procedure signature; passwd21 repeats the hash
    return {
        "name1": account.name,
        "passwd1": account.password_hash,
        "prompt1": account.prompt,
        "answer1": account.answer,
        "truename1": account.truename,
        "idnumber1": account.idnumber,
        "email1": account.email,
        "mobilenumber1": account.mobilenumber,
        "province1": account.province,
        "city1": account.city,
        "phonenumber1": account.phonenumber,
        "address1": account.address,
        "postalcode1": account.postalcode,
        "gender1": account.gender,
        "birthday1": account.birthday,
        "qq1": account.qq,
        "passwd21": account.password_hash,
    }


def user_row(account: NewAccount) -> dict[str, Any]:
    return {
        "name": account.name,
        "passwd": account.password_hash,
        "prompt": account.prompt,
        "answer": account.answer,
        "truename": account.truename,
        "idnumber": account.idnumber,
        "email": account.email,
        "mobilenumber": account.mobilenumber,
        "province": account.province,
        "city": account.city,
        "phonenumber": account.phonenumber,
        "address": account.address,
        "postalcode": account.postalcode,
        "gender": account.gender,
        "birthday": account.birthday,
        "qq": account.qq,
        "passwd2": account.password_hash,
    }


class UserStore:
    """Account lookups and creation on top of a shared `Database`."""

    def __init__(self, db: Database, use_procedure: bool | None = None):
        self.db = db
        self.use_procedure = db.supports_procedures if use_procedure is None else use_procedure

    async def exists(self, name: str, email: str) -> bool:
        stmt = select(User.id).where(or_(User.name == name, User.email == email)).limit(1)
        async with self.db.sessionmaker() as session:
            return (await session.scalar(stmt)) is not None

    async def create(self, account: NewAccount) -> None:
        """Write one account.

        Raises DuplicateAccountError when a unique key rejects the row (two
        registrations racing past `exists`), AccountWriteError for anything
        else the database reports.
        """
        if self.use_procedure:
            stmt = ADDUSER_CALL.bindparams(**adduser_params(account))
        else:
            stmt = insert(User).values(**user_row(account))

        try:
            async with self.db.sessionmaker() as session:
                async with session.begin():
                    await session.execute(stmt)
        except IntegrityError as e:
            logger.info("Insert for %r hit a unique key: %s", account.name, e.orig)
            raise DuplicateAccountError() from e
        except SQLAlchemyError as e:
            logger.exception("Failed to create account %r", account.name)
            raise AccountWriteError() from e

