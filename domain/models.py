from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class NavItem:
    key: str
    label: str


class FormStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCESS = "success"
    ERROR = "error"


class ActionType(str, Enum):
    NAVIGATE = "NAVIGATE"
    FIELD_CHANGE = "FIELD_CHANGE"
    SUBMIT = "SUBMIT"
    SUBMIT_RESULT = "SUBMIT_RESULT"


@dataclass(frozen=True)
class Action:
    type: ActionType
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    detail: str = ""


@dataclass(frozen=True)
class ContactForm:
    name: str = ""
    email: str = ""
    company: str = ""
    team_size: str = ""
    message: str = ""
    status: FormStatus = FormStatus.IDLE

    def fields(self) -> Dict[str, str]:
        """Field values only (the payload handed to a submission endpoint)."""
        return {
            'name': self.name,
            'email': self.email,
            'company': self.company,
            'team_size': self.team_size,
            'message': self.message,
        }

    def with_status(self, status: FormStatus) -> "ContactForm":
        return replace(self, status=status)


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    image: str
    tags: Dict[str, str] = field(default_factory=dict)
    route: Optional[str] = None
