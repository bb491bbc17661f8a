"""
Comment service - comments on tasks and the users they mention.

Only the author of a comment may edit or delete it; for anyone else the
comment does not exist.
"""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import ListQuery, combine, search_where
from tracker.application.dto.comment import CreateCommentDTO, UpdateCommentDTO
from tracker.application.services.base import EntityService, cascade_namespaces
from tracker.domain.enums import EntityType
from tracker.domain.exceptions import EntityNotFoundError
from tracker.domain.ports import Record


class CommentService(EntityService):
    entity_type = EntityType.COMMENT

    async def _own_comment(self, comment_id: int, user_id: int) -> Record:
        comment = await self._tracker.current(self.entity_type, comment_id)
        if comment["userId"] != user_id:
            raise EntityNotFoundError(f"Comment with the id {comment_id} not found.")
        return comment

    async def _mentioned_ids(self, comment_id: int) -> list[int]:
        mentions = await self._gateway.find_many(
            EntityType.MENTION, where={"commentId": comment_id}, order_by={"id": "asc"}
        )
        return [m["userId"] for m in mentions]

    async def _add_mentions(
        self, comment_id: int, user_ids: list[int], edited_by: int
    ) -> list[Record]:
        """Mention every user not yet mentioned in the comment."""
        wanted = list(dict.fromkeys(user_ids))
        for user_id in wanted:
            await self._require(EntityType.USER, user_id)

        already = set(await self._mentioned_ids(comment_id))
        mentions = []
        for user_id in wanted:
            if user_id in already:
                continue
            change = await self._tracker.create(
                EntityType.MENTION,
                {"commentId": comment_id, "userId": user_id},
                edited_by,
                namespaces=(self.entity_type.namespace,),
            )
            mentions.append(change.record)
        return mentions

    @handle_errors
    async def create(self, dto: CreateCommentDTO, edited_by: int) -> dict:
        data = dto.to_data()
        mentions = data.pop("mentions", None) or []
        await self._require(EntityType.TASK, data["taskId"])
        for user_id in mentions:
            await self._require(EntityType.USER, user_id)

        change = await self._tracker.create(
            self.entity_type, {**data, "userId": edited_by}, edited_by
        )
        created = await self._add_mentions(change.record["id"], mentions, edited_by)
        return {
            "message": "Comment created successfully.",
            "comment": change.record,
            "mentions": created,
        }

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = combine(
            search_where(query.search, "message"),
            {"userId": query.user_id} if query.user_id else {},
        )
        comments, count = await self._find_page(
            self.entity_type, "findComments", query, where
        )
        return {
            "message": "Comments loaded successfully.",
            "count": count,
            "comments": comments,
        }

    @handle_errors
    async def find_one(self, comment_id: int) -> dict:
        comment = await self._find_detail(self.entity_type, comment_id)
        return {"message": "Comment loaded successfully.", "comment": comment}

    @handle_errors
    async def find_mentioned_users(self, comment_id: int, query: ListQuery) -> dict:
        await self._find_detail(self.entity_type, comment_id)
        users, count = await self._find_users(
            "findMentionedUsers",
            lambda: self._mentioned_ids(comment_id),
            query,
            EntityType.MENTION.namespace,
            commentId=comment_id,
        )
        return {
            "message": "Mentioned users of the comment loaded successfully.",
            "count": count,
            "users": users,
        }

    @handle_errors
    async def find_mentioned_user(self, comment_id: int, user_id: int) -> dict:
        await self._find_detail(self.entity_type, comment_id)
        mention = await self._gateway.find_first(
            EntityType.MENTION, {"commentId": comment_id, "userId": user_id}
        )
        if not mention:
            raise EntityNotFoundError(
                f"User with the id {user_id} is not mentioned in the comment {comment_id}."
            )
        user = await self._find_detail(EntityType.USER, user_id)
        return {"message": "Mentioned user of the comment loaded successfully.", "user": user}

    @handle_errors
    async def update(self, comment_id: int, dto: UpdateCommentDTO, edited_by: int) -> dict:
        comment = await self._own_comment(comment_id, edited_by)
        data = dto.to_data()
        mentions = data.pop("mentions", None) or []
        for user_id in mentions:
            await self._require(EntityType.USER, user_id)

        change = await self._tracker.update(
            self.entity_type, comment_id, data, edited_by, current=comment
        )
        created = await self._add_mentions(comment_id, mentions, edited_by)
        return {
            "message": "Comment updated successfully.",
            "comment": change.record,
            "mentions": created,
        }

    @handle_errors
    async def remove(self, comment_id: int, edited_by: int) -> dict:
        comment = await self._own_comment(comment_id, edited_by)
        await self._tracker.delete(
            self.entity_type,
            comment_id,
            edited_by,
            namespaces=cascade_namespaces(self.entity_type),
            current=comment,
        )
        return {"message": "Comment deleted successfully."}
