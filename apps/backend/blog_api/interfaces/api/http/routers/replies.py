"""
===============================================================================
TARJETA CRC — blog_api/interfaces/api/http/routers/replies.py
===============================================================================

Name:
    Replies Router

Responsibilities:
    - Endpoints HTTP para comentarios (list/create por documento, delete por id).
    - Mapeo de UseCaseError -> RFC7807 (INVALID_STATE => 400).

Collaborators:
    - application.usecases (replies)
    - interfaces.api.http.dependencies.get_optional_caller
    - schemas.replies
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from blog_api.application.usecases import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    ListRepliesUseCase,
)
from blog_api.container import (
    get_create_reply_use_case,
    get_delete_reply_use_case,
    get_list_replies_use_case,
)
from blog_api.domain.caller import Caller
from blog_api.domain.entities import Reply
from fastapi import APIRouter, Depends

from ..dependencies import get_optional_caller
from ..error_mapping import raise_use_case_error
from ..schemas.replies import DeleteReplyRes, RepliesListRes, ReplyCreateReq, ReplyRes

router = APIRouter()


def _to_reply_res(reply: Reply) -> ReplyRes:
    return ReplyRes(
        id=reply.id,
        document_id=reply.document_id,
        owner_id=reply.owner_id,
        content=reply.content,
        created_at=reply.created_at,
    )


@router.get(
    "/documents/{document_id}/replies",
    response_model=RepliesListRes,
    tags=["replies"],
)
def list_replies(
    document_id: UUID,
    caller: Caller = Depends(get_optional_caller),
    use_case: ListRepliesUseCase = Depends(get_list_replies_use_case),
):
    result = use_case.execute(caller=caller, document_id=document_id)
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=document_id)
    return RepliesListRes(replies=[_to_reply_res(r) for r in result.replies])


@router.post(
    "/documents/{document_id}/replies",
    response_model=ReplyRes,
    status_code=201,
    tags=["replies"],
)
def create_reply(
    document_id: UUID,
    req: ReplyCreateReq,
    caller: Caller = Depends(get_optional_caller),
    use_case: CreateReplyUseCase = Depends(get_create_reply_use_case),
):
    result = use_case.execute(
        caller=caller, document_id=document_id, content=req.content
    )
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=document_id)
    return _to_reply_res(result.reply)


@router.delete("/replies/{reply_id}", response_model=DeleteReplyRes, tags=["replies"])
def delete_reply(
    reply_id: UUID,
    caller: Caller = Depends(get_optional_caller),
    use_case: DeleteReplyUseCase = Depends(get_delete_reply_use_case),
):
    result = use_case.execute(caller=caller, reply_id=reply_id)
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=reply_id)
    return DeleteReplyRes(deleted=result.deleted)
