"""
Optimistic updates with rollback.

    snapshot = read()
    write(proposed)          # visible immediately
    await persist(proposed)  # may fail
    write(snapshot)          # only on failure

Usage:
    ok = await apply_optimistic(
        read=lambda: store.items,
        write=store.set_items,
        proposed=new_items,
        persist=services.save_items,
    )
"""

from typing import Awaitable, Callable, Optional, TypeVar

from core.errors import PlatformError

T = TypeVar("T")


async def apply_optimistic(
    read: Callable[[], T],
    write: Callable[[T], None],
    proposed: T,
    persist: Callable[[T], Awaitable[None]],
    on_rollback: Optional[Callable[[PlatformError], None]] = None,
) -> bool:
    """
    Applies `proposed` in memory, then persists it.

    Returns True if persisted. On PlatformError the pre-update value is
    written back, `on_rollback` is called with the error and False is
    returned. Other exceptions roll back and propagate.
    """
    snapshot = read()
    write(proposed)
    try:
        await persist(proposed)
    except PlatformError as e:
        write(snapshot)
        if on_rollback is not None:
            on_rollback(e)
        return False
    except BaseException:
        write(snapshot)
        raise
    return True
