import logging
from typing import Any, Generic, Iterable, Mapping, Type, TypeVar
from fastapi import Depends
from sqlalchemy import delete, inspect, select
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from types import FunctionType, MethodType
from asyncio import iscoroutinefunction
from functools import wraps

from compete_api.database import get_async_session
from compete_api.exceptions import Conflict, NotFound, PersistenceError
from compete_api.utils.partial_update import build_partial_update

logger = logging.getLogger(__name__)


def _integrity_detail(error: IntegrityError) -> str:
    return str(error.orig) if error.orig is not None else str(error)


class ExceptionHandlerMeta(type):
    def __new__(cls, name, bases, dct):
        for attr_name, attr_value in dct.items():
            if isinstance(attr_value, (FunctionType, MethodType)):
                if iscoroutinefunction(attr_value):
                    dct[attr_name] = cls.async_exception_handler(attr_value)
                else:
                    dct[attr_name] = cls.sync_exception_handler(attr_value)
        return super().__new__(cls, name, bases, dct)

    @staticmethod
    def sync_exception_handler(method):
        @wraps(method)
        def wrapper(*args, **kwargs):
            try:
                return method(*args, **kwargs)
            except IntegrityError as e:
                logger.warning("%s: integrity error: %s", method.__qualname__, e.orig)
                raise Conflict("Conflicting data", error=_integrity_detail(e))
            except SQLAlchemyError as e:
                logger.exception("%s failed", method.__qualname__)
                raise PersistenceError(error=str(e))

        return wrapper

    @staticmethod
    def async_exception_handler(method):
        @wraps(method)
        async def wrapper(*args, **kwargs):
            try:
                return await method(*args, **kwargs)
            except IntegrityError as e:
                logger.warning("%s: integrity error: %s", method.__qualname__, e.orig)
                raise Conflict("Conflicting data", error=_integrity_detail(e))
            except SQLAlchemyError as e:
                logger.exception("%s failed", method.__qualname__)
                raise PersistenceError(error=str(e))

        return wrapper


_T = TypeVar("_T", bound=DeclarativeBase)


class BaseService(metaclass=ExceptionHandlerMeta):
    def __init__(self, session: AsyncSession) -> None:
        super().__init__()
        self.session = session

    @classmethod
    async def get_service(
        cls,
        session: AsyncSession = Depends(get_async_session),
    ):
        return cls(session)


class ModelRequests(Generic[_T], metaclass=ExceptionHandlerMeta):
    """Single-statement CRUD for ``model``.

    ``updatable_fields`` is the allow-list for partial updates and
    ``flag_fields`` the subset stored as 0/1.
    """

    model: Type[_T] = None
    updatable_fields: Iterable[str] = ()
    flag_fields: Iterable[str] = ()
    session: AsyncSession

    def __init__(self) -> None:
        super().__init__()
        if not self.model:
            raise ValueError("model is not defined")

    @property
    def key_column(self):
        return getattr(self.model, inspect(self.model).primary_key[0].key)

    def not_found(self) -> NotFound:
        return NotFound(f"{self.model.__name__} not found")

    async def get(self, id: int) -> _T:
        stmt = select(self.model).where(self.key_column == id)
        data = await self.session.scalar(stmt)
        if not data:
            raise self.not_found()
        return data

    async def get_list(self, *order_by, **filters) -> list[_T]:
        stmt = select(self.model).filter_by(**filters).order_by(*order_by)
        scalars = await self.session.scalars(stmt)
        return list(scalars.all())

    async def post(self, **data) -> _T:
        instance = self.model(**data)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        return instance

    async def update(self, id: int, payload: Mapping[str, Any]) -> bool:
        """Apply ``payload`` to row ``id``; ``False`` when there was nothing to apply."""
        partial = build_partial_update(
            self.updatable_fields, payload, key=id, flags=self.flag_fields
        )
        if partial is None:
            return False

        result = await self.session.execute(
            partial.statement(self.model, self.key_column),
            execution_options={"synchronize_session": False},
        )
        if result.rowcount == 0:
            await self.session.rollback()
            raise self.not_found()
        await self.session.commit()
        return True

    async def delete(self, id: int) -> bool:
        result = await self.session.execute(
            delete(self.model).where(self.key_column == id),
            execution_options={"synchronize_session": False},
        )
        if result.rowcount == 0:
            await self.session.rollback()
            raise self.not_found()
        await self.session.commit()
        return True
