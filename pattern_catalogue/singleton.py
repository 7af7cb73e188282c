"""Singleton holders: a plain lazy one and a thread-safe one."""

import logging
import threading
from typing import Any, Optional

logger = logging.getLogger(__name__)


def _refuse_construction(cls) -> None:
    raise TypeError(
        f"{cls.__name__} is a singleton; use {cls.__name__}.instance() instead"
    )


def _construct(cls, *args: Any):
    # Bypasses the guarded __new__; only instance() calls this
    instance = object.__new__(cls)
    instance.__init__(*args)
    return instance


class Singleton:
    """
    Lazily created single instance, one per class.

    Only reachable through ``instance()``; calling the class raises TypeError.

    Not safe to call ``instance()`` from several threads at once; see
    ThreadSafeSingleton for that.
    """

    _instance: Optional["Singleton"] = None

    def __new__(cls, *args, **kwargs):
        _refuse_construction(cls)

    @classmethod
    def instance(cls) -> "Singleton":
        # Look in the class's own namespace so every subclass keeps its own instance
        if cls.__dict__.get("_instance") is None:
            cls._instance = _construct(cls)
        return cls._instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls.__dict__.get("_instance") is not None

    def some_business_logic(self) -> None:
        """Any singleton should define business logic executed on its instance."""


class ThreadSafeSingleton:
    """
    Single instance guarded by double-checked locking.

    The value passed by the first caller to construct the instance is kept;
    values passed by every later caller are ignored. Calling the class
    directly raises TypeError.
    """

    _instance: Optional["ThreadSafeSingleton"] = None
    _lock = threading.Lock()

    def __new__(cls, *args, **kwargs):
        _refuse_construction(cls)

    def __init__(self, value: Any):
        self.value = value

    @classmethod
    def instance(cls, value: Any) -> "ThreadSafeSingleton":
        instance = cls.__dict__.get("_instance")
        if instance is not None:
            return instance

        with cls._lock:
            # Another thread may have finished construction while we waited
            instance = cls.__dict__.get("_instance")
            if instance is None:
                instance = _construct(cls, value)
                cls._instance = instance
                logger.debug("Constructed %s with value %r", cls.__name__, value)

        return instance

    @classmethod
    def has_instance(cls) -> bool:
        return cls.__dict__.get("_instance") is not None

    def some_business_logic(self) -> None:
        """Any singleton should define business logic executed on its instance."""


def report_singleton_value(value: Any) -> None:
    singleton = ThreadSafeSingleton.instance(value)
    print(singleton.value)


def demo() -> None:
    s1 = Singleton.instance()
    s2 = Singleton.instance()

    if s1 is s2:
        print("Singleton works, both variables contain the same instance.")
    else:
        print("Singleton failed, variables contain different instances.")

    print(
        "If you see the same value, then singleton was reused (yay!)\n"
        "If you see different values, then 2 singletons were created (booo!!)\n\n"
        "RESULT:\n"
    )

    process1 = threading.Thread(target=report_singleton_value, args=("FOO",))
    process2 = threading.Thread(target=report_singleton_value, args=("BAR",))
    process1.start()
    process2.start()
    process1.join()
    process2.join()
