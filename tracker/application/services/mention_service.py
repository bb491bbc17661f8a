"""Mention service - a user mentioned in a comment."""

from tracker.application.common.error_classifier import handle_errors
from tracker.application.common.queries import ListQuery, equals_where
from tracker.application.dto.mention import CreateMentionDTO
from tracker.application.services.base import EntityService
from tracker.domain.enums import EntityType
from tracker.domain.exceptions import BadRequestError


class MentionService(EntityService):
    entity_type = EntityType.MENTION

    @handle_errors
    async def create(self, dto: CreateMentionDTO, edited_by: int) -> dict:
        data = dto.to_data()
        await self._require(EntityType.COMMENT, data["commentId"])
        await self._require(EntityType.USER, data["userId"])

        existing = await self._gateway.find_first(
            self.entity_type, {"commentId": data["commentId"], "userId": data["userId"]}
        )
        if existing:
            raise BadRequestError(
                f"User with the id {data['userId']} is already mentioned in the comment {data['commentId']}."
            )

        change = await self._tracker.create(
            self.entity_type, data, edited_by, namespaces=(EntityType.COMMENT.namespace,)
        )
        return {"message": "Mention created successfully.", "mention": change.record}

    @handle_errors
    async def find_all(self, query: ListQuery) -> dict:
        where = equals_where(commentId=query.comment_id, userId=query.user_id)
        mentions, count = await self._find_page(
            self.entity_type, "findMentions", query, where
        )
        return {
            "message": "Mentions loaded successfully.",
            "count": count,
            "mentions": mentions,
        }

    @handle_errors
    async def find_one(self, mention_id: int) -> dict:
        mention = await self._find_detail(self.entity_type, mention_id)
        return {"message": "Mention loaded successfully.", "mention": mention}

    @handle_errors
    async def remove(self, mention_id: int, edited_by: int) -> dict:
        await self._tracker.delete(
            self.entity_type,
            mention_id,
            edited_by,
            namespaces=(EntityType.COMMENT.namespace,),
        )
        return {"message": "Mention deleted successfully."}
