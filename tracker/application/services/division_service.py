"""Division service - CRUD plus the division's users and departments."""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import ListQuery, combine, search_where
from tracker.application.dto.division import CreateDivisionDTO, UpdateDivisionDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType


class DivisionService(EntityService):
    entity_type = EntityType.DIVISION

    @handle_errors
    async def create(self, dto: CreateDivisionDTO, edited_by: int) -> dict:
        change = await self._tracker.create(self.entity_type, dto.to_data(), edited_by)
        return {"message": "Division created successfully.", "division": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        divisions, count = await self._find_page(
            self.entity_type,
            "findDivisions",
            query,
            search_where(query.search, "code", "description"),
        )
        return {
            "message": "Divisions loaded successfully.",
            "count": count,
            "divisions": divisions,
        }

    @handle_errors
    async def find_one(self, division_id: int) -> dict:
        division = await self._find_detail(self.entity_type, division_id)
        return {"message": "Division loaded successfully.", "division": division}

    @handle_errors
    async def find_users(self, division_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, division_id)
        where = combine(
            search_where(query.search, "firstName", "middleName", "lastName"),
            {"divisionId": division_id},
            {"departmentId": query.department_id} if query.department_id else {},
        )
        users, count = await self._find_page(
            EntityType.USER, "findDivisionUsers", query, where, divisionId=division_id
        )
        return {
            "message": "Division users loaded successfully.",
            "count": count,
            "users": users,
        }

    @handle_errors
    async def find_user(self, division_id: int, user_id: int) -> dict:
        user = await self._find_member(
            EntityType.USER,
            user_id,
            "divisionId",
            division_id,
            f"Division user with the id {user_id} not found.",
        )
        return {"message": "User of the division loaded successfully.", "user": user}

    @handle_errors
    async def find_departments(self, division_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, division_id)
        where = combine(
            search_where(query.search, "code", "description"),
            {"divisionId": division_id},
        )
        departments, count = await self._find_page(
            EntityType.DEPARTMENT,
            "findDivisionDepartments",
            query,
            where,
            divisionId=division_id,
        )
        return {
            "message": "Division departments loaded successfully.",
            "count": count,
            "departments": departments,
        }

    @handle_errors
    async def find_department(self, division_id: int, department_id: int) -> dict:
        department = await self._find_member(
            EntityType.DEPARTMENT,
            department_id,
            "divisionId",
            division_id,
            f"Division department with the id {department_id} not found.",
        )
        return {
            "message": "Division department loaded successfully.",
            "department": department,
        }

    @handle_errors
    async def update(self, division_id: int, dto: UpdateDivisionDTO, edited_by: int) -> dict:
        change = await self._tracker.update(
            self.entity_type, division_id, dto.to_data(), edited_by
        )
        return {"message": "Division updated successfully.", "division": change.record}

    @handle_errors
    async def remove(self, division_id: int, edited_by: int) -> dict:
        # departments and users of the division keep existing with divisionId = null
        await self._tracker.delete(
            self.entity_type,
            division_id,
            edited_by,
            namespaces=cascade_namespaces(self.entity_type),
        )
        return {"message": "Division deleted successfully."}
