"""
Data transfer router.

Endpoints:
- GET /data/export: Download the whole document as JSON
- POST /data/import: Replace or merge the document from a JSON body
- POST /data/reset: Wipe all accounts and entries

Import and reset act on the whole document, including other users'
accounts, exactly as the diary's settings screen does.
"""
import logging

from fastapi import APIRouter, Depends, Query, Request, Response
from starlette.concurrency import run_in_threadpool

from api.deps import document_lock, get_transfer_service
from api.errors import to_http_exception
from application.errors import InvalidFormat, StoreError
from application.services import ImportMode, TransferService, export_filename

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/data",
    tags=["data"],
)


@router.get("/export")
def export_document(transfer: TransferService = Depends(get_transfer_service)):
    """Export the full document as a JSON attachment."""
    with document_lock:
        content = transfer.export_document()
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{export_filename()}"'},
    )


def _import_locked(transfer: TransferService, text: str, mode: ImportMode) -> bool:
    with document_lock:
        return transfer.import_document(text, mode)


@router.post("/import")
async def import_document(
    request: Request,
    mode: ImportMode = Query(default=ImportMode.OVERWRITE),
    transfer: TransferService = Depends(get_transfer_service),
):
    """
    Import a previously exported document.

    ``mode=overwrite`` replaces everything; ``mode=merge`` keeps local users
    and adds incoming ones, re-keying any whose id is already taken.
    Returns 400 if the body is not a valid document.
    """
    body = await request.body()
    try:
        text = body.decode("utf-8")
        await run_in_threadpool(_import_locked, transfer, text, mode)
    except UnicodeDecodeError:
        raise to_http_exception(InvalidFormat("Import failed: body is not UTF-8"))
    except StoreError as e:
        logger.warning(f"Import rejected: {e.message}")
        raise to_http_exception(e)
    return {"success": True, "mode": mode.value}


@router.post("/reset")
def reset_document(transfer: TransferService = Depends(get_transfer_service)):
    """Reset storage to an empty document."""
    with document_lock:
        transfer.reset()
    return {"success": True}
