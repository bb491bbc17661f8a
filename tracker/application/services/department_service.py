"""Department service - CRUD plus the department's users."""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import ListQuery, combine, search_where
from tracker.application.dto.department import CreateDepartmentDTO, UpdateDepartmentDTO
from tracker.application.services.base import EntityService
from tracker.domain.enums import EntityType


class DepartmentService(EntityService):
    entity_type = EntityType.DEPARTMENT

    @handle_errors
    async def create(self, dto: CreateDepartmentDTO, edited_by: int) -> dict:
        data = dto.to_data()
        if data.get("divisionId") is not None:
            await self._require(EntityType.DIVISION, data["divisionId"])

        change = await self._tracker.create(self.entity_type, data, edited_by)
        return {"message": "Department created successfully.", "department": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "code", "description"),
            {"divisionId": query.division_id} if query.division_id else {},
        )
        departments, count = await self._find_page(
            self.entity_type, "findDepartments", query, where
        )
        return {
            "message": "Departments loaded successfully.",
            "count": count,
            "departments": departments,
        }

    @handle_errors
    async def find_one(self, department_id: int) -> dict:
        department = await self._find_detail(self.entity_type, department_id)
        return {"message": "Department loaded successfully.", "department": department}

    @handle_errors
    async def find_users(self, department_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, department_id)
        where = combine(
            search_where(query.search, "firstName", "middleName", "lastName"),
            {"departmentId": department_id},
        )
        users, count = await self._find_page(
            EntityType.USER,
            "findDepartmentUsers",
            query,
            where,
            departmentId=department_id,
        )
        return {
            "message": "Department's users loaded successfully.",
            "count": count,
            "users": users,
        }

    @handle_errors
    async def find_user(self, department_id: int, user_id: int) -> dict:
        user = await self._find_member(
            EntityType.USER,
            user_id,
            "departmentId",
            department_id,
            f"Department user with the id {user_id} not found.",
        )
        return {"message": "Department user loaded successfully.", "user": user}

    @handle_errors
    async def update(
        self, department_id: int, dto: UpdateDepartmentDTO, edited_by: int
    ) -> dict:
        data = dto.to_data()
        if data.get("divisionId") is not None:
            await self._require(EntityType.DIVISION, data["divisionId"])

        change = await self._tracker.update(
            self.entity_type, department_id, data, edited_by
        )
        return {"message": "Department updated successfully.", "department": change.record}

    @handle_errors
    async def remove(self, department_id: int, edited_by: int) -> dict:
        await self._tracker.delete(self.entity_type, department_id, edited_by)
        return {"message": "Department deleted successfully."}
