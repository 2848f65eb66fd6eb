# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2026 Waldiez and contributors.

"""SQLAlchemy integration.

Decorate a mapped class with :func:`guarded` and persist its instances with
:func:`save`::

    @guarded("password", cost=12)
    class User(Base):
        __tablename__ = "users"
        ...

    user = await save(session, User(email="a@b.c", password="secret"))
    assert await user.compare("secret")
"""

import logging
from typing import Any, Callable, Optional, Set, Type, TypeVar

from sqlalchemy import event, inspect
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstanceState, Mapper, Session
from sqlalchemy.orm.attributes import set_committed_value
from sqlalchemy.orm.unitofwork import UOWTransaction

from .config import SecretFieldConfig, Settings
from .exceptions import GuardConfigurationError
from .guard import OptionsType, SecretFieldGuard
from .hashing import Hasher

LOG = logging.getLogger(__name__)

GUARD_ATTRIBUTE = "__secret_guard__"
ACCEPTED_KEY = "secret_guard.accepted"
T = TypeVar("T")


class MappedRecord:
    """Expose a mapped instance to the guard."""

    def __init__(self, instance: Any) -> None:
        """Initialize the record.

        Parameters
        ----------
        instance : Any
            The mapped instance.
        """
        self.instance = instance
        self._state: InstanceState[Any] = inspect(instance)

    @property
    def is_new(self) -> bool:
        """Whether the instance has not been inserted yet.

        Returns
        -------
        bool
            True for transient and pending instances.
        """
        return self._state.key is None

    def get(self, field: str) -> Any:
        """Get the current value of a field.

        Parameters
        ----------
        field : str
            The field name.

        Returns
        -------
        Any
            The value.
        """
        return getattr(self.instance, field)

    def set(self, field: str, value: Any) -> None:
        """Set the value of a field.

        Parameters
        ----------
        field : str
            The field name.
        value : Any
            The new value.
        """
        setattr(self.instance, field, value)

    def has_changed(self, field: str) -> bool:
        """Check if a field changed since the instance was loaded.

        A new instance is inserted with all its columns, so every field
        counts as changed.

        Parameters
        ----------
        field : str
            The field name.

        Returns
        -------
        bool
            Whether the field will be written.
        """
        if self.is_new:
            return True
        return bool(self._state.attrs[field].history.has_changes())

    def changed_fields(self) -> Set[str]:
        """Get the names of the column attributes that will be written.

        Returns
        -------
        Set[str]
            The changed field names.
        """
        keys = self._state.mapper.column_attrs.keys()
        return {key for key in keys if self.has_changed(key)}

    def accept(self, field: str) -> None:
        """Remember the value of a field the guard let through.

        Parameters
        ----------
        field : str
            The field name.
        """
        if self.has_changed(field):
            self._state.info[ACCEPTED_KEY] = (field, self.get(field))

    def is_accepted(self, field: str) -> bool:
        """Check if the current value of a field went through the guard.

        Parameters
        ----------
        field : str
            The field name.

        Returns
        -------
        bool
            Whether the value was accepted by the last guarded save.
        """
        accepted = self._state.info.get(ACCEPTED_KEY)
        if accepted is None:
            return False
        accepted_field, accepted_value = accepted
        if accepted_field != field:
            return False
        return bool(accepted_value == self.get(field))

    def revert(self, field: str) -> None:
        """Drop the pending change of a stored record's field.

        The loaded value is restored if it is known, otherwise the field
        is expired so the next access reads it from the database.

        Parameters
        ----------
        field : str
            The field name.
        """
        if self.is_new:
            return
        history = self._state.attrs[field].history
        if history.deleted:
            set_committed_value(self.instance, field, history.deleted[0])
        elif self._state.session is not None:
            self._state.session.expire(self.instance, [field])


def get_guard(target: Any) -> Optional[SecretFieldGuard]:
    """Get the guard of a mapped class or instance.

    Parameters
    ----------
    target : Any
        The class or instance.

    Returns
    -------
    Optional[SecretFieldGuard]
        The guard, or None if the type is not guarded.
    """
    cls = target if isinstance(target, type) else type(target)
    guard = getattr(cls, GUARD_ATTRIBUTE, None)
    if isinstance(guard, SecretFieldGuard):
        return guard
    return None


async def _compare(self: Any, candidate: Optional[str]) -> bool:
    """Compare a secret against the hash stored in this instance.

    Parameters
    ----------
    candidate : Optional[str]
        The plain secret to check.

    Returns
    -------
    bool
        True if the stored hash was generated from the candidate.
    """
    guard = get_guard(self)
    if guard is None:  # pragma: no cover
        raise GuardConfigurationError(
            f"{type(self).__name__} is not guarded"
        )
    return await guard.compare_record(MappedRecord(self), candidate)


def _get_mapper(cls: Type[Any]) -> Mapper[Any]:
    mapper = inspect(cls, raiseerr=False)
    if not isinstance(mapper, Mapper):
        raise GuardConfigurationError(f"{cls.__name__} is not a mapped class")
    return mapper


def install_guard(cls: Type[T], guard: SecretFieldGuard) -> Type[T]:
    """Install a guard on a mapped class.

    Installing an equal configuration twice is a no-op.

    Parameters
    ----------
    cls : Type[T]
        The mapped class.
    guard : SecretFieldGuard
        The guard to install.

    Returns
    -------
    Type[T]
        The same class.

    Raises
    ------
    GuardConfigurationError
        If the class is not mapped, the field is not a column of it,
        it defines its own ``compare`` or it is already guarded with a
        different configuration.
    """
    mapper = _get_mapper(cls)
    if guard.field_name not in mapper.column_attrs.keys():
        raise GuardConfigurationError(
            f"{guard.field_name} is not a column of {cls.__name__}"
        )
    existing = cls.__dict__.get(GUARD_ATTRIBUTE)
    if isinstance(existing, SecretFieldGuard):
        if existing.config == guard.config:
            LOG.debug("%s is already guarded", cls.__name__)
            return cls
        raise GuardConfigurationError(
            f"{cls.__name__} is already guarded with a different configuration"
        )
    current = getattr(cls, "compare", None)
    if current is not None and current is not _compare:
        raise GuardConfigurationError(
            f"{cls.__name__}.compare is already defined"
        )
    setattr(cls, GUARD_ATTRIBUTE, guard)
    setattr(cls, "compare", _compare)
    LOG.info("Guarding %s.%s", cls.__name__, guard.field_name)
    return cls


def guarded(
    field_name: Optional[str] = None,
    *,
    config: Optional[SecretFieldConfig] = None,
    hasher: Optional[Hasher] = None,
    settings: Optional[Settings] = None,
    **options: Any,
) -> Callable[[Type[T]], Type[T]]:
    """Class decorator that guards a secret field of a mapped class.

    Parameters
    ----------
    field_name : Optional[str]
        The name of the guarded field (ignored if ``config`` is given).
    config : Optional[SecretFieldConfig]
        A ready configuration.
    hasher : Optional[Hasher]
        The hasher to use, defaults to bcrypt.
    settings : Optional[Settings]
        The settings providing the defaults for the configuration.
    **options : Any
        Other ``SecretFieldConfig`` values (cost, allow_empty_secret,
        on_rehash, rehash_detector).

    Returns
    -------
    Callable[[Type[T]], Type[T]]
        The decorator.

    Raises
    ------
    GuardConfigurationError
        If neither a field name nor a configuration is given.
    """
    if config is None:
        if not field_name:
            raise GuardConfigurationError(
                "A field name or a configuration is required"
            )
        config = SecretFieldConfig.from_settings(
            field_name, settings=settings, **options
        )
    guard = SecretFieldGuard(config, hasher=hasher)

    def _decorator(cls: Type[T]) -> Type[T]:
        return install_guard(cls, guard)

    return _decorator


@event.listens_for(Session, "before_flush")
def _refuse_unguarded_secrets(
    session: Session,
    flush_context: UOWTransaction,  # pylint: disable=unused-argument
    instances: Optional[Any],  # pylint: disable=unused-argument
) -> None:
    """Refuse to flush a guarded field that did not go through ``save``.

    Parameters
    ----------
    session : Session
        The session being flushed.
    flush_context : UOWTransaction
        The unit of work.
    instances : Optional[Any]
        The instances passed to ``flush``, if any.

    Raises
    ------
    GuardConfigurationError
        If a new or changed guarded value was not accepted by its guard.
    """
    for instance in [*session.new, *session.dirty]:
        guard = get_guard(instance)
        if guard is None:
            continue
        record = MappedRecord(instance)
        field = guard.field_name
        if record.has_changed(field) and not record.is_accepted(field):
            raise GuardConfigurationError(
                f"{type(instance).__name__}.{field} changed outside of save()"
            )


async def save(
    session: AsyncSession,
    instance: T,
    options: OptionsType = None,
    *,
    commit: bool = True,
) -> T:
    """Run the guard and persist an instance.

    If the guard fails, the instance is not added to the session and a
    stored instance gets its guarded field back, so a later flush cannot
    write the rejected value.

    Parameters
    ----------
    session : AsyncSession
        The database session.
    instance : T
        The mapped instance.
    options : OptionsType
        The per call options (``hash_secret=False`` to bypass hashing).
    commit : bool
        Commit and refresh the instance (default) or only flush.

    Returns
    -------
    T
        The persisted instance.
    """
    guard = get_guard(instance)
    if guard is not None:
        record = MappedRecord(instance)
        try:
            await guard.before_persist(
                record, record.changed_fields(), options
            )
        except BaseException:
            record.revert(guard.field_name)
            raise
        record.accept(guard.field_name)
    session.add(instance)
    if commit:
        await session.commit()
        await session.refresh(instance)
    else:
        await session.flush()
    return instance


__all__ = [
    "ACCEPTED_KEY",
    "GUARD_ATTRIBUTE",
    "MappedRecord",
    "get_guard",
    "guarded",
    "install_guard",
    "save",
]
