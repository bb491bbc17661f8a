import pytest

from fakes import EDITOR_ID, seed_task_tree
from tracker.application.common.queries import ListQuery
from tracker.application.dto.user import CreateUserDTO, UpdateUserDTO
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import BadRequestError, EntityNotFoundError


@pytest.fixture()
def user_service(services):
    return services[EntityType.USER]


def new_user(**overrides):
    fields = {
        "email": "grace@example.com",
        "password": "long-enough",
        "first_name": "Grace",
        "last_name": "Hopper",
        "department_id": 1,
    }
    fields.update(overrides)
    return CreateUserDTO(**fields)


@pytest.mark.asyncio
async def test_create_hashes_password_and_hides_credentials(user_service, gateway):
    response = await user_service.create(new_user(), EDITOR_ID)

    user = response["user"]
    assert "password" not in user
    assert "refreshToken" not in user

    stored = gateway.tables[EntityType.USER][user["id"]]
    assert stored["password"] == "hashed:long-enough"

    (log,) = gateway.rows(EntityType.LOG)
    assert log["logTypeId"] == LogType.USER
    assert log["logMethodId"] == LogMethod.CREATE
    assert "password" not in log["logs"]
    assert log["logs"]["email"] == "grace@example.com"


@pytest.mark.asyncio
async def test_duplicate_email_names_the_field(user_service):
    with pytest.raises(BadRequestError) as exc_info:
        await user_service.create(new_user(email="admin@example.com"), EDITOR_ID)

    assert "email" in exc_info.value.message


@pytest.mark.asyncio
async def test_unknown_department_is_not_found(user_service, gateway):
    with pytest.raises(EntityNotFoundError):
        await user_service.create(new_user(department_id=77), EDITOR_ID)

    assert len(gateway.rows(EntityType.USER)) == 1


@pytest.mark.asyncio
async def test_list_and_detail_never_expose_credentials(user_service):
    listed = await user_service.find_all(ListQuery())
    detail = await user_service.find_one(EDITOR_ID)

    assert listed["count"] == 1
    for user in [*listed["users"], detail["user"]]:
        assert "password" not in user
        assert "refreshToken" not in user


@pytest.mark.asyncio
async def test_list_filters_by_department(user_service, gateway):
    gateway.seed(EntityType.DEPARTMENT, code="IT", description="Information Technology")
    await user_service.create(new_user(department_id=2), EDITOR_ID)

    response = await user_service.find_all(ListQuery(department_id=2))

    assert response["count"] == 1
    assert response["users"][0]["firstName"] == "Grace"


@pytest.mark.asyncio
async def test_password_change_is_rehashed_and_not_logged(user_service, gateway):
    await user_service.update(
        EDITOR_ID, UpdateUserDTO(password="new-password", first_name="Augusta"), EDITOR_ID
    )

    assert gateway.tables[EntityType.USER][EDITOR_ID]["password"] == "hashed:new-password"
    (log,) = gateway.rows(EntityType.LOG)
    assert log["logs"] == {"firstName": "Ada"}


@pytest.mark.asyncio
async def test_middle_name_can_be_cleared(user_service, gateway):
    gateway.tables[EntityType.USER][EDITOR_ID]["middleName"] = "King"

    response = await user_service.update(EDITOR_ID, UpdateUserDTO(middle_name=None), EDITOR_ID)

    assert response["user"]["middleName"] is None
    (log,) = gateway.rows(EntityType.LOG)
    assert log["logs"] == {"middleName": "King"}


@pytest.mark.asyncio
async def test_related_lists_of_a_user(user_service, gateway):
    project, work, task = seed_task_tree(gateway)

    projects = await user_service.find_projects(EDITOR_ID, ListQuery())
    works = await user_service.find_works(EDITOR_ID, ListQuery())
    tasks = await user_service.find_tasks(EDITOR_ID, ListQuery())

    assert [p["id"] for p in projects["projects"]] == [project["id"]]
    assert [w["id"] for w in works["works"]] == [work["id"]]
    assert [t["id"] for t in tasks["tasks"]] == [task["id"]]

    response = await user_service.find_task(EDITOR_ID, task["id"])
    assert response["task"]["title"] == "Patient tables"


@pytest.mark.asyncio
async def test_remove_user(user_service, gateway):
    created = await user_service.create(new_user(), EDITOR_ID)

    await user_service.remove(created["user"]["id"], EDITOR_ID)

    assert len(gateway.rows(EntityType.USER)) == 1
    delete_log = gateway.rows(EntityType.LOG)[-1]
    assert delete_log["logMethodId"] == LogMethod.DELETE
    assert "password" not in delete_log["logs"]
