"""Shared enumerations used across platform services."""

from enum import Enum, IntEnum


class Environment(IntEnum):
    """Deployment environment; the value seeds timestamp-based ids."""

    DEV = 1
    QA = 2
    PROD = 3


class ProgressStatus(IntEnum):
    NOT_STARTED = 0
    STARTED = 1
    COMPLETED = 2


class Status(Enum):
    """Active flag as stored on records."""

    ACTIVE = True
    INACTIVE = False


class CourseMgmtStatus(str, Enum):
    DRAFT = "draft"
    LIVE = "live"
    RETIRED = "retired"
