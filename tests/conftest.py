import pytest
from dishka import make_async_container
from fastapi.testclient import TestClient

from fakes import (
    EDITOR_ID,
    FakeInfrastructureProvider,
    InMemoryCacheStore,
    InMemoryGateway,
    PlainHasher,
)
from jwt_generation import generate_jwt_token
from tracker.application.common.audit_log import AuditLogWriter
from tracker.application.common.cache_registry import CacheKeyRegistry
from tracker.application.common.change_tracker import ChangeTracker
from tracker.application.services import (
    CommentService,
    DepartmentService,
    DivisionService,
    LogService,
    MentionService,
    ProjectService,
    TaskService,
    UserService,
    WorkService,
)
from tracker.domain.enums import EntityType
from tracker.fastapi_app import create_fastapi_app
from tracker.setup.ioc.application import ApplicationProvider


@pytest.fixture()
def gateway():
    gateway = InMemoryGateway()
    gateway.seed(EntityType.DEPARTMENT, code="HR", description="Human Resource")
    gateway.seed(
        EntityType.USER,
        email="admin@example.com",
        password="hashed:secret",
        refreshToken="refresh",
        firstName="Ada",
        lastName="Admin",
        departmentId=1,
    )
    return gateway


@pytest.fixture()
def cache():
    return InMemoryCacheStore()


@pytest.fixture()
def registry(cache):
    return CacheKeyRegistry(cache, ttl=60)


@pytest.fixture()
def audit_log(gateway):
    return AuditLogWriter(gateway)


@pytest.fixture()
def tracker(gateway, audit_log, registry):
    return ChangeTracker(gateway, audit_log, registry)


@pytest.fixture()
def services(gateway, registry, tracker):
    """Every resource service over the same gateway, cache and registry."""
    return {
        EntityType.DEPARTMENT: DepartmentService(gateway, registry, tracker),
        EntityType.DIVISION: DivisionService(gateway, registry, tracker),
        EntityType.USER: UserService(gateway, registry, tracker, PlainHasher()),
        EntityType.PROJECT: ProjectService(gateway, registry, tracker),
        EntityType.WORK: WorkService(gateway, registry, tracker),
        EntityType.TASK: TaskService(gateway, registry, tracker),
        EntityType.COMMENT: CommentService(gateway, registry, tracker),
        EntityType.MENTION: MentionService(gateway, registry, tracker),
        EntityType.LOG: LogService(gateway, registry, tracker),
    }


@pytest.fixture()
def app(gateway, cache):
    """FastAPI app wired to the in-memory gateway and cache."""
    container = make_async_container(
        FakeInfrastructureProvider(gateway, cache), ApplicationProvider()
    )
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture()
def auth_headers():
    """Authentication headers with valid JWT token."""
    return {"Authorization": f"Bearer {generate_jwt_token(EDITOR_ID)}"}
