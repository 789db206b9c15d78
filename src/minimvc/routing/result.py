"""DispatchResult — what happened to one dispatch call."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from minimvc.middleware.protocol import AnyResponse
from minimvc.routing.route import Route


class DispatchOutcome(Enum):
    """Terminal state of a dispatch call."""

    HANDLED = "handled"
    ABORTED = "aborted"
    NOT_FOUND = "not_found"


@dataclass(frozen=True, slots=True)
class DispatchResult:
    """Result of ``Router.dispatch()``.

    - ``NOT_FOUND``: no route matched; ``route`` is ``None`` and nothing ran.
    - ``ABORTED``: a middleware stopped dispatch; ``response`` is what it
      produced and ``aborted_by`` is the middleware instance.
    - ``HANDLED``: the handler ran; ``value`` is its return value.
    """

    outcome: DispatchOutcome
    method: str
    path: str
    route: Route | None = None
    args: tuple[str, ...] = ()
    value: Any = None
    response: AnyResponse | None = None
    aborted_by: Any = None

    @property
    def found(self) -> bool:
        return self.outcome is not DispatchOutcome.NOT_FOUND

    @property
    def handled(self) -> bool:
        return self.outcome is DispatchOutcome.HANDLED

    @property
    def aborted(self) -> bool:
        return self.outcome is DispatchOutcome.ABORTED
