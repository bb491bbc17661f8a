import pytest

from fakes import EDITOR_ID, seed_task_tree, utc
from tracker.application.common.queries import ListQuery
from tracker.application.dto.project import CreateProjectDTO, UpdateProjectDTO
from tracker.application.dto.work import CreateWorkDTO
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import BadRequestError, EntityNotFoundError


@pytest.fixture()
def project_service(services):
    return services[EntityType.PROJECT]


@pytest.mark.asyncio
async def test_create_defaults_author_to_editor(project_service, gateway):
    response = await project_service.create(
        CreateProjectDTO(
            name="Intranet",
            description="New intranet",
            start_date=utc(2024, 1, 1),
            end_date=utc(2024, 6, 30),
        ),
        EDITOR_ID,
    )

    assert response["project"]["authorId"] == EDITOR_ID
    (log,) = gateway.rows(EntityType.LOG)
    assert log["logTypeId"] == LogType.PROJECT
    assert log["logMethodId"] == LogMethod.CREATE


@pytest.mark.asyncio
async def test_start_after_end_is_rejected(project_service, gateway):
    with pytest.raises(BadRequestError):
        await project_service.create(
            CreateProjectDTO(
                name="Backwards",
                description="Ends before it starts",
                start_date=utc(2024, 6, 1),
                end_date=utc(2024, 1, 1),
            ),
            EDITOR_ID,
        )

    assert gateway.rows(EntityType.PROJECT) == []


@pytest.mark.asyncio
async def test_unknown_author_is_not_found(project_service):
    with pytest.raises(EntityNotFoundError):
        await project_service.create(
            CreateProjectDTO(
                name="Orphan",
                description="No author",
                start_date=utc(2024, 1, 1),
                end_date=utc(2024, 2, 1),
                author_id=55,
            ),
            EDITOR_ID,
        )


@pytest.mark.asyncio
async def test_new_dates_must_contain_existing_works(project_service, gateway):
    project, work, _ = seed_task_tree(gateway)

    with pytest.raises(BadRequestError):
        await project_service.update(
            project["id"], UpdateProjectDTO(end_date=utc(2024, 5, 31)), EDITOR_ID
        )
    assert gateway.rows(EntityType.LOG) == []

    response = await project_service.update(
        project["id"], UpdateProjectDTO(end_date=utc(2024, 7, 31)), EDITOR_ID
    )
    assert response["project"]["endDate"] == utc(2024, 7, 31)
    (log,) = gateway.rows(EntityType.LOG)
    assert log["logs"] == {"endDate": str(utc(2024, 12, 31))}


@pytest.mark.asyncio
async def test_work_must_fit_inside_project(services, gateway):
    project, _, _ = seed_task_tree(gateway)

    with pytest.raises(BadRequestError):
        await services[EntityType.WORK].create(
            CreateWorkDTO(
                name="Late",
                type="ops",
                description="Runs past the project",
                start_date=utc(2024, 11, 1),
                end_date=utc(2025, 2, 1),
                project_id=project["id"],
            ),
            EDITOR_ID,
        )


@pytest.mark.asyncio
async def test_project_works_and_date_filter(project_service, gateway):
    project, work, _ = seed_task_tree(gateway)

    inside = await project_service.find_works(project["id"], ListQuery(date_within=utc(2024, 3, 15)))
    outside = await project_service.find_works(project["id"], ListQuery(date_within=utc(2024, 9, 1)))

    assert [w["id"] for w in inside["works"]] == [work["id"]]
    assert outside["count"] == 0

    with pytest.raises(EntityNotFoundError):
        await project_service.find_work(project["id"] + 1, work["id"])


@pytest.mark.asyncio
async def test_remove_clears_cached_lists_of_children(project_service, services, gateway):
    project, _, _ = seed_task_tree(gateway)
    work_service = services[EntityType.WORK]
    await work_service.find_all(ListQuery())
    await work_service.find_all(ListQuery())
    assert gateway.calls[("find_many", EntityType.WORK)] == 1

    await project_service.remove(project["id"], EDITOR_ID)
    await work_service.find_all(ListQuery())

    assert gateway.calls[("find_many", EntityType.WORK)] == 2
