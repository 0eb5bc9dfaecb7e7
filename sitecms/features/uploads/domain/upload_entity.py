"""
Upload Domain Entities.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class UploadFile:
    """An uploaded file held in memory."""
    filename: str
    content: bytes
    content_type: str = 'application/octet-stream'

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_file_storage(cls, file_storage) -> 'UploadFile':
        """Build from a werkzeug FileStorage (request.files entry)."""
        content = file_storage.read()
        return cls(
            filename=file_storage.filename or 'upload',
            content=content,
            content_type=file_storage.mimetype or 'application/octet-stream',
        )


@dataclass(frozen=True)
class UploadResult:
    url: str
    provider: str
    file_name: str
    size: int
    content_type: str
    path: Optional[str] = None
