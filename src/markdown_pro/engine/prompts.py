"""Parameter prompts requested by shortcuts such as link, image and table."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Mapping, Optional, Protocol, Union


class ParameterKind(str, Enum):
    """Values a shortcut may ask the user for."""

    URL = "url"
    IMAGE_URL = "image_url"
    COLUMNS = "columns"
    ROWS = "rows"


# kind -> (message, default answer)
PROMPTS: Mapping[ParameterKind, tuple[str, Optional[str]]] = {
    ParameterKind.URL: ("Enter URL:", None),
    ParameterKind.IMAGE_URL: ("Enter image URL:", None),
    ParameterKind.COLUMNS: ("Columns?", "3"),
    ParameterKind.ROWS: ("Rows?", "2"),
}


class ParameterRequest(Protocol):
    """Synchronous request for one line of text; ``None`` means cancelled."""

    def request_parameter(
        self, kind: ParameterKind, *, message: str, default: Optional[str] = None
    ) -> Optional[str]:
        ...


class NoParameters:
    """Cancels every request. Hosts without dialogs use this."""

    def request_parameter(
        self, kind: ParameterKind, *, message: str, default: Optional[str] = None
    ) -> Optional[str]:
        del kind, message, default
        return None


class ScriptedParameters:
    """Answers prompts from a mapping keyed by kind, or from a queue in order.

    Running out of answers behaves like a dismissed dialog.
    """

    def __init__(
        self,
        answers: Union[
            Mapping[Union[ParameterKind, str], Optional[str]], Iterable[Optional[str]]
        ] = (),
    ) -> None:
        self._by_kind: dict[ParameterKind, Optional[str]] = {}
        self._queue: List[Optional[str]] = []
        if isinstance(answers, Mapping):
            self._by_kind = {ParameterKind(k): v for k, v in answers.items()}
        else:
            self._queue = list(answers)
        self.asked: List[ParameterKind] = []

    def request_parameter(
        self, kind: ParameterKind, *, message: str, default: Optional[str] = None
    ) -> Optional[str]:
        del message, default
        self.asked.append(kind)
        if kind in self._by_kind:
            return self._by_kind.pop(kind)
        if self._queue:
            return self._queue.pop(0)
        return None


def ask(prompts: ParameterRequest, kind: ParameterKind) -> Optional[str]:
    message, default = PROMPTS[kind]
    return prompts.request_parameter(kind, message=message, default=default)


__all__ = [
    "ParameterKind",
    "PROMPTS",
    "ParameterRequest",
    "NoParameters",
    "ScriptedParameters",
    "ask",
]
