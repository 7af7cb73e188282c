"""A proxy controlling access to a real subject."""

import logging
import time
from abc import ABC, abstractmethod
from typing import List

logger = logging.getLogger(__name__)


class Subject(ABC):
    """Operations shared by the real subject and its proxy."""

    @abstractmethod
    def request(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'request'"
        )


class RealSubject(Subject):
    def request(self) -> None:
        print("RealSubject: Handling request.")


class Proxy(Subject):
    """Checks access before, and records the time after, each real request."""

    def __init__(self, real_subject: RealSubject):
        self._real_subject = real_subject
        self.access_log: List[float] = []

    def request(self) -> None:
        if self.check_access():
            self._real_subject.request()
            self.log_access()

    def check_access(self) -> bool:
        print("Proxy: Checking access prior to firing a real request.")
        return True

    def log_access(self) -> None:
        self.access_log.append(time.time())
        logger.debug("Request forwarded to %s", type(self._real_subject).__name__)
        print("Proxy: Logging the time of request.", end="")


def client_code(subject: Subject) -> None:
    subject.request()


def demo() -> None:
    print("Client: Executing the client code with a real subject:")
    real_subject = RealSubject()
    client_code(real_subject)

    print("")

    print("Client: Executing the same client code with a proxy:")
    proxy = Proxy(real_subject)
    client_code(proxy)
    print()
