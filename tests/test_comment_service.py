import pytest

from fakes import EDITOR_ID, seed_task_tree
from tracker.application.common.queries import ListQuery
from tracker.application.dto.comment import CreateCommentDTO, UpdateCommentDTO
from tracker.domain.enums import EntityType, LogMethod, LogType
from tracker.domain.exceptions import EntityNotFoundError


@pytest.fixture()
def task(gateway):
    _, _, task = seed_task_tree(gateway)
    return task


@pytest.fixture()
def colleague(gateway):
    return gateway.seed(
        EntityType.USER,
        email="grace@example.com",
        password="hashed:x",
        firstName="Grace",
        lastName="Hopper",
        departmentId=1,
    )


@pytest.fixture()
def comment_service(services):
    return services[EntityType.COMMENT]


@pytest.mark.asyncio
async def test_delete_logs_full_prior_record(comment_service, gateway, task):
    gateway.seed(EntityType.COMMENT, id=42, message="Looks good", userId=EDITOR_ID, taskId=task["id"])
    await comment_service.find_one(42)

    response = await comment_service.remove(42, EDITOR_ID)

    assert response == {"message": "Comment deleted successfully."}
    (log,) = gateway.rows(EntityType.LOG)
    assert log["logMethodId"] == LogMethod.DELETE
    assert log["logTypeId"] == LogType.COMMENT
    assert log["logs"]["id"] == 42
    assert log["logs"]["message"] == "Looks good"
    assert log["logs"]["taskId"] == task["id"]

    with pytest.raises(EntityNotFoundError):
        await comment_service.find_one(42)


@pytest.mark.asyncio
async def test_only_the_author_may_change_a_comment(comment_service, gateway, task, colleague):
    gateway.seed(EntityType.COMMENT, id=7, message="Mine", userId=colleague["id"], taskId=task["id"])

    with pytest.raises(EntityNotFoundError):
        await comment_service.remove(7, EDITOR_ID)
    with pytest.raises(EntityNotFoundError):
        await comment_service.update(7, UpdateCommentDTO(message="Yours"), EDITOR_ID)

    assert gateway.rows(EntityType.COMMENT)[0]["message"] == "Mine"
    assert gateway.rows(EntityType.LOG) == []


@pytest.mark.asyncio
async def test_create_with_mentions(comment_service, gateway, task, colleague):
    response = await comment_service.create(
        CreateCommentDTO(message="Please review", task_id=task["id"], mentions=str(colleague["id"])),
        EDITOR_ID,
    )

    assert response["comment"]["userId"] == EDITOR_ID
    assert [m["userId"] for m in response["mentions"]] == [colleague["id"]]

    logs = gateway.rows(EntityType.LOG)
    assert [(log["logTypeId"], log["logMethodId"]) for log in logs] == [
        (LogType.COMMENT, LogMethod.CREATE),
        (LogType.MENTION, LogMethod.CREATE),
    ]

    users = await comment_service.find_mentioned_users(response["comment"]["id"], ListQuery())
    assert users["count"] == 1
    assert users["users"][0]["firstName"] == "Grace"


@pytest.mark.asyncio
async def test_update_skips_users_already_mentioned(comment_service, gateway, task, colleague):
    created = await comment_service.create(
        CreateCommentDTO(message="First", task_id=task["id"], mentions=[colleague["id"]]),
        EDITOR_ID,
    )
    comment_id = created["comment"]["id"]

    updated = await comment_service.update(
        comment_id,
        UpdateCommentDTO(message="Second", mentions=[colleague["id"], EDITOR_ID]),
        EDITOR_ID,
    )

    assert updated["comment"]["message"] == "Second"
    assert [m["userId"] for m in updated["mentions"]] == [EDITOR_ID]
    assert len(gateway.rows(EntityType.MENTION)) == 2


@pytest.mark.asyncio
async def test_mentioned_user_lookup(comment_service, task, colleague):
    created = await comment_service.create(
        CreateCommentDTO(message="Ping", task_id=task["id"], mentions=[colleague["id"]]),
        EDITOR_ID,
    )
    comment_id = created["comment"]["id"]

    response = await comment_service.find_mentioned_user(comment_id, colleague["id"])
    assert response["user"]["email"] == "grace@example.com"
    assert "password" not in response["user"]

    with pytest.raises(EntityNotFoundError):
        await comment_service.find_mentioned_user(comment_id, EDITOR_ID)


@pytest.mark.asyncio
async def test_comment_on_missing_task(comment_service, gateway):
    with pytest.raises(EntityNotFoundError):
        await comment_service.create(CreateCommentDTO(message="Hi", task_id=404), EDITOR_ID)

    assert gateway.rows(EntityType.COMMENT) == []
