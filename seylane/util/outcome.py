"""
Outcome — value-or-error returned at every vendor boundary.

Vendor clients never raise for transport, auth, configuration or parse
problems. They return Outcome.failure(kind, details) and the calling service
decides the safe default (empty list, default intent, apology text, False).
"""

# Python Packages
from dataclasses import dataclass
from typing import Any, Optional


class ErrorKind:
    """ Error-kind tags carried by a failed Outcome... """

    NOT_CONFIGURED = "not_configured"
    AUTH           = "auth"
    TRANSPORT      = "transport"
    PARSE          = "parse"


@dataclass(frozen=True)
class Outcome:
    ok: bool
    value: Any = None
    error_kind: Optional[str] = None
    details: Optional[str] = None


    @classmethod
    def success(cls, value: Any = None) -> "Outcome":
        return cls(ok = True, value = value)


    @classmethod
    def failure(cls, error_kind: str, details: str = None) -> "Outcome":
        return cls(ok = False, error_kind = error_kind, details = details)


    def value_or(self, default: Any) -> Any:
        """ Return the value on success, else *default*... """

        return self.value if self.ok else default


    def __str__(self) -> str:
        if self.ok:
            return "Outcome(ok)"
        return f"Outcome({self.error_kind}: {self.details})"
