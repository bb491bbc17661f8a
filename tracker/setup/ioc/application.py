"""
Application provider - audit log writer, change tracker and resource services.

Everything here is REQUEST scoped and depends only on ports
(PersistenceGateway, CacheKeyRegistry, PasswordHasher), so any infrastructure
provider that supplies those can be paired with it.
"""

from dishka import Provider, Scope, provide

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
from tracker.domain.ports import PasswordHasher, PersistenceGateway


class ApplicationProvider(Provider):
    """
    Registers the application layer.

    - Scope.REQUEST = new instance per HTTP request
    - Parameters are resolved by Dishka from the infrastructure provider
    """

    # ==================== CORE ====================

    @provide(scope=Scope.REQUEST)
    def get_audit_log_writer(self, gateway: PersistenceGateway) -> AuditLogWriter:
        return AuditLogWriter(gateway)

    @provide(scope=Scope.REQUEST)
    def get_change_tracker(
        self,
        gateway: PersistenceGateway,
        audit_log: AuditLogWriter,
        registry: CacheKeyRegistry,
    ) -> ChangeTracker:
        return ChangeTracker(gateway, audit_log, registry)

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_department_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> DepartmentService:
        return DepartmentService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_division_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> DivisionService:
        return DivisionService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_user_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
        hasher: PasswordHasher,
    ) -> UserService:
        return UserService(gateway, registry, tracker, hasher)

    @provide(scope=Scope.REQUEST)
    def get_project_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> ProjectService:
        return ProjectService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_work_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> WorkService:
        return WorkService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_task_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> TaskService:
        return TaskService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_comment_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> CommentService:
        return CommentService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_mention_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> MentionService:
        return MentionService(gateway, registry, tracker)

    @provide(scope=Scope.REQUEST)
    def get_log_service(
        self,
        gateway: PersistenceGateway,
        registry: CacheKeyRegistry,
        tracker: ChangeTracker,
    ) -> LogService:
        return LogService(gateway, registry, tracker)
