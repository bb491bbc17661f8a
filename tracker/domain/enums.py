"""
Lookup values shared across the tracker.

LogType / LogMethod ids match the seeded LogType / LogMethod rows.
"""

from enum import Enum, IntEnum


class LogMethod(IntEnum):
    CREATE = 1
    UPDATE = 2
    DELETE = 3


class LogType(IntEnum):
    COMMENT = 1
    DEPARTMENT = 2
    PROJECT = 3
    SUBTASK = 4
    TASK = 5
    USER = 6
    WORK = 7
    DIVISION = 8
    MENTION = 9


class EntityType(str, Enum):
    """
    Entity handled by the persistence gateway.

    The value is the Prisma client attribute for the model
    (prisma.department, prisma.user, ...).
    """

    DEPARTMENT = "department"
    DIVISION = "division"
    USER = "user"
    PROJECT = "project"
    WORK = "work"
    TASK = "task"
    COMMENT = "comment"
    MENTION = "mention"
    LOG = "log"

    @property
    def namespace(self) -> str:
        """Cache namespace for list keys of this entity, e.g. DEPARTMENT:"""
        return f"{self.name}:"

    @property
    def identifier(self) -> str:
        """Cache identifier for single-entity keys, e.g. single-department"""
        return f"single-{self.value}"

    @property
    def detail_namespace(self) -> str:
        """Registry tag of every single-entity key of this type (cascade deletes)"""
        return f"{Namespace.GENERAL.value}{self.identifier}"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def log_type(self) -> LogType:
        return LogType[self.name]


class Namespace(str, Enum):
    GENERAL = "GENERAL:"


class PaginationDefault(IntEnum):
    OFFSET = 0
    LIMIT = 10


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
