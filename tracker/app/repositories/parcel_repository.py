"""
Parcel repository.

Maps the Parcel entity to the `parcel` table. Each operation is one
statement in its own short transaction. Address edits and deletion are
gated on `status = 'registered'` inside the statement's WHERE clause, so
there is no window between checking the status and acting on it.
"""

from typing import List, Union

from sqlalchemy import select, update, delete
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import async_sessionmaker

from tracker.app.core.config import settings
from tracker.app.core.exceptions import ParcelNotFoundError, NoRowsUpdatedError, NoRowsDeletedError
from tracker.app.core.observability import observed
from tracker.app.core.reliability import DEFAULT_TIMEOUT, with_deadline
from tracker.app.models.parcel import Parcel
from tracker.app.models.parcel_enums import ParcelStatus
from tracker.app.schemas.parcel import ParcelCreate, ParcelRead


def _status_value(status: Union[ParcelStatus, str]) -> str:
    return status.value if isinstance(status, ParcelStatus) else status


class ParcelRepository:
    """
    Data access for parcels.

    Args:
        sessions: Session factory owned by the caller.
        timeout: Default per-call deadline in seconds, ``None`` for no
            deadline. Falls back to ``settings.statement_timeout_seconds``
            when omitted.
    """

    def __init__(self, sessions: async_sessionmaker, timeout=DEFAULT_TIMEOUT):
        self.sessions = sessions
        self.timeout = settings.statement_timeout_seconds if timeout is DEFAULT_TIMEOUT else timeout

    @observed("create")
    @with_deadline
    async def create(self, parcel: ParcelCreate) -> int:
        """
        Insert a parcel and return its generated number.

        The stored status is always "registered", whatever the caller sent.
        """
        new_parcel = Parcel(
            client=parcel.client,
            status=ParcelStatus.REGISTERED.value,
            address=parcel.address,
            created_at=parcel.created_at,
        )
        async with self.sessions() as session:
            async with session.begin():
                session.add(new_parcel)
                await session.flush()
                return new_parcel.number

    @observed("get_by_id")
    @with_deadline
    async def get_by_id(self, number: int) -> ParcelRead:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number. It is a
                ``NoResultFound`` as well.
        """
        async with self.sessions() as session:
            result = await session.execute(
                select(Parcel).where(Parcel.number == number)
            )
            try:
                parcel = result.scalar_one()
            except NoResultFound as exc:
                raise ParcelNotFoundError(number) from exc
            return ParcelRead.model_validate(parcel)

    @observed("list_by_client")
    @with_deadline
    async def list_by_client(self, client: int) -> List[ParcelRead]:
        """
        Fetch all parcels of a client.

        Rows are streamed and converted one by one. An empty list means the
        client has no parcels; a failure mid-stream raises instead of
        returning a partial list.
        """
        parcels: List[ParcelRead] = []
        async with self.sessions() as session:
            result = await session.stream_scalars(
                select(Parcel).where(Parcel.client == client)
            )
            try:
                async for parcel in result:
                    parcels.append(ParcelRead.model_validate(parcel))
            finally:
                await result.close()
        return parcels

    @observed("update_status")
    @with_deadline
    async def update_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """
        Set the status of a parcel. The target value is not validated.

        Raises:
            NoRowsUpdatedError: If no parcel has this number.
        """
        stmt = update(Parcel).where(
            Parcel.number == number
        ).values(
            status=_status_value(status)
        ).execution_options(synchronize_session=False)
        async with self.sessions() as session:
            async with session.begin():
                result = await session.execute(stmt)
                affected = result.rowcount
        if affected == 0:
            raise NoRowsUpdatedError(number)

    @observed("update_address")
    @with_deadline
    async def update_address(self, number: int, address: str) -> None:
        """
        Change the address of a registered parcel.

        Raises:
            NoRowsUpdatedError: If the parcel is missing or not registered.
        """
        stmt = update(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED.value
        ).values(
            address=address
        ).execution_options(synchronize_session=False)
        async with self.sessions() as session:
            async with session.begin():
                result = await session.execute(stmt)
                affected = result.rowcount
        if affected == 0:
            raise NoRowsUpdatedError(number)

    @observed("delete")
    @with_deadline
    async def delete(self, number: int) -> None:
        """
        Delete a registered parcel.

        Raises:
            NoRowsDeletedError: If the parcel is missing or not registered.
        """
        stmt = delete(Parcel).where(
            Parcel.number == number,
            Parcel.status == ParcelStatus.REGISTERED.value
        ).execution_options(synchronize_session=False)
        async with self.sessions() as session:
            async with session.begin():
                result = await session.execute(stmt)
                affected = result.rowcount
        if affected == 0:
            raise NoRowsDeletedError(number)
