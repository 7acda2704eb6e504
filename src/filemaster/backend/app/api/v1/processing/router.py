from typing import Annotated, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse

from filemaster.backend.app.api.v1.processing.deps import (
    get_process_files_use_case,
    get_record_download_use_case,
)
from filemaster.backend.app.api.v1.processing.mappers import (
    get_download_input_dto,
    get_process_files_input_dto,
    preview_dto_to_response,
    result_dto_to_response,
)
from filemaster.backend.app.api.v1.processing.schemas import PreviewResponse, ProcessResponse
from filemaster.backend.app.api.v1.users.deps import get_logged_in_user
from filemaster.backend.app.application.processing.dto import PreviewResultDTO
from filemaster.backend.app.application.processing.use_cases import ProcessFilesUseCase, RecordDownloadUseCase
from filemaster.backend.app.application.users import CurrentUserDTO

router = APIRouter(tags=["processing"])

logged_in_user_dep = Annotated[CurrentUserDTO, Depends(get_logged_in_user)]
process_files_dep = Annotated[ProcessFilesUseCase, Depends(get_process_files_use_case)]
record_download_dep = Annotated[RecordDownloadUseCase, Depends(get_record_download_use_case)]


@router.post("/process", response_model=ProcessResponse | PreviewResponse)
async def process_files(
        user: logged_in_user_dep,
        use_case: process_files_dep,
        files: Annotated[Optional[list[UploadFile]], File()] = None,
        tool: Annotated[Optional[str], Form()] = None,
        compress_level: Annotated[Optional[str], Form()] = None,
        fmt: Annotated[Optional[str], Form(alias="format")] = None,
        order: Annotated[Optional[str], Form()] = None,
):
    dto = get_process_files_input_dto(user.id, tool, files or [], compress_level, fmt, order)
    result = await use_case.execute(dto)
    if isinstance(result, PreviewResultDTO):
        return preview_dto_to_response(result)
    return result_dto_to_response(result)


@router.get("/download/{file_name}")
async def download_file(
        user: logged_in_user_dep,
        use_case: record_download_dep,
        file_name: str,
) -> FileResponse:
    dto = get_download_input_dto(user.id, file_name)
    download = await use_case.execute(dto)
    return FileResponse(
        download.path,
        media_type=download.content_type,
        filename=download.display_name,
    )
