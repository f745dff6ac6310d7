"""
===============================================================================
TARJETA CRC — blog_api/interfaces/api/http/routers/documents.py
===============================================================================

Name:
    Documents Router

Responsibilities:
    - Endpoints HTTP para documentos (list/get/create/update/delete).
    - Resolver Caller (opcional) y delegar TODA decisión a los use cases.
    - Mapeo de UseCaseError -> RFC7807.

Collaborators:
    - application.usecases (documents)
    - interfaces.api.http.dependencies.get_optional_caller
    - interfaces.api.http.error_mapping
    - schemas.documents
    - container factories
===============================================================================
"""

from __future__ import annotations

from uuid import UUID

from blog_api.application.usecases import (
    CreateDocumentInput,
    CreateDocumentUseCase,
    DeleteDocumentUseCase,
    GetDocumentUseCase,
    ListDocumentsUseCase,
    UpdateDocumentUseCase,
)
from blog_api.container import (
    get_create_document_use_case,
    get_delete_document_use_case,
    get_get_document_use_case,
    get_list_documents_use_case,
    get_update_document_use_case,
)
from blog_api.crosscutting.pagination import build_page_info
from blog_api.domain.caller import Caller
from blog_api.domain.entities import Document, DocumentStatus
from fastapi import APIRouter, Depends, Query

from ..dependencies import get_optional_caller
from ..error_mapping import raise_use_case_error
from ..schemas.documents import (
    DeleteDocumentRes,
    DocumentCreateReq,
    DocumentRes,
    DocumentsListRes,
    DocumentUpdateReq,
)

router = APIRouter()


def _to_document_res(doc: Document) -> DocumentRes:
    return DocumentRes(
        id=doc.id,
        title=doc.title,
        content=doc.content,
        owner_id=doc.owner_id,
        status=doc.status,
        tags=list(doc.tags or []),
        created_at=doc.created_at,
        updated_at=doc.updated_at,
    )


@router.get("/documents", response_model=DocumentsListRes, tags=["documents"])
def list_documents(
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1),
    search: str | None = Query(None, max_length=200),
    status: DocumentStatus | None = Query(None),
    caller: Caller = Depends(get_optional_caller),
    use_case: ListDocumentsUseCase = Depends(get_list_documents_use_case),
):
    result = use_case.execute(
        caller=caller, status=status, search=search, page=page, limit=limit
    )
    if result.error is not None:
        raise_use_case_error(result.error)

    return DocumentsListRes(
        documents=[_to_document_res(d) for d in result.documents],
        pagination=build_page_info(
            page=result.page, limit=result.limit, total=result.total
        ),
    )


@router.get("/documents/{document_id}", response_model=DocumentRes, tags=["documents"])
def get_document(
    document_id: UUID,
    caller: Caller = Depends(get_optional_caller),
    use_case: GetDocumentUseCase = Depends(get_get_document_use_case),
):
    result = use_case.execute(caller=caller, document_id=document_id)
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=document_id)
    return _to_document_res(result.document)


@router.post(
    "/documents",
    response_model=DocumentRes,
    status_code=201,
    tags=["documents"],
)
def create_document(
    req: DocumentCreateReq,
    caller: Caller = Depends(get_optional_caller),
    use_case: CreateDocumentUseCase = Depends(get_create_document_use_case),
):
    result = use_case.execute(
        caller=caller,
        input_data=CreateDocumentInput(
            title=req.title, content=req.content, tags=req.tags, status=req.status
        ),
    )
    if result.error is not None:
        raise_use_case_error(result.error)
    return _to_document_res(result.document)


@router.put("/documents/{document_id}", response_model=DocumentRes, tags=["documents"])
def update_document(
    document_id: UUID,
    req: DocumentUpdateReq,
    caller: Caller = Depends(get_optional_caller),
    use_case: UpdateDocumentUseCase = Depends(get_update_document_use_case),
):
    result = use_case.execute(
        caller=caller, document_id=document_id, changes=req.changes()
    )
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=document_id)
    return _to_document_res(result.document)


@router.delete(
    "/documents/{document_id}", response_model=DeleteDocumentRes, tags=["documents"]
)
def delete_document(
    document_id: UUID,
    caller: Caller = Depends(get_optional_caller),
    use_case: DeleteDocumentUseCase = Depends(get_delete_document_use_case),
):
    result = use_case.execute(caller=caller, document_id=document_id)
    if result.error is not None:
        raise_use_case_error(result.error, resource_id=document_id)
    return DeleteDocumentRes(
        deleted=result.deleted, replies_deleted=result.replies_deleted
    )
