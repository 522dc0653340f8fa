from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileMetadata(BaseModel):
    """Tracker-side description of a stored file, as reported by file_info"""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(..., description="Domain the key lives in")
    key: str = Field(..., description="Key of the file")
    fid: int = Field(..., description="File identifier")
    device_count: int = Field(..., description="Number of devices holding a copy")
    length: int = Field(..., description="File size in bytes")
    storage_class: Optional[str] = Field(
        None, description="Storage class, absent for the default class"
    )
