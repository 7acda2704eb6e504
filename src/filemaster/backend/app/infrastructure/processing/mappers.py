from filemaster.backend.app.domain.processing import ProcessedFile, Tool
from filemaster.backend.app.infrastructure.db.models.processed_file import ProcessedFileModel


def processed_file_model_to_domain(m: ProcessedFileModel) -> ProcessedFile:
    return ProcessedFile(
        id=m.id,
        stored_name=m.stored_name,
        display_name=m.display_name,
        owner_id=m.owner_id,
        original_size=m.original_size,
        output_size=m.output_size,
        content_type=m.content_type,
        tool_used=Tool(m.tool_used),
        compression_ratio=m.compression_ratio,
        download_count=m.download_count,
        created_at=m.created_at,
    )


def processed_file_domain_to_model(p: ProcessedFile) -> ProcessedFileModel:
    return ProcessedFileModel(
        id=p.id,
        stored_name=p.stored_name,
        display_name=p.display_name,
        owner_id=p.owner_id,
        original_size=p.original_size,
        output_size=p.output_size,
        content_type=p.content_type,
        tool_used=p.tool_used.value,
        compression_ratio=p.compression_ratio,
        download_count=p.download_count,
        created_at=p.created_at,
    )
