from typing import Any

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, model_validator


class Destination(BaseModel):
    """
    A storage device and URL where a newly opened file may be written.

    ``path`` is the parsed URL. ``raw_path`` keeps the text the tracker sent,
    which is what create_close must echo back; parsing may normalise the URL
    (trailing slash, host case, escaping). When only ``path`` is given,
    ``raw_path`` defaults to its string form.
    """

    model_config = ConfigDict(frozen=True)

    dev_id: int = Field(..., description="Identifier of the storage device")
    fid: int = Field(..., description="File identifier assigned by the tracker")
    path: AnyUrl = Field(..., description="Storage node URL for this device")
    raw_path: str = Field(..., description="Storage node URL exactly as issued")

    @model_validator(mode="before")
    @classmethod
    def _default_raw_path(cls, data: Any) -> Any:
        if (
            isinstance(data, dict)
            and data.get("raw_path") is None
            and data.get("path") is not None
        ):
            data = {**data, "raw_path": str(data["path"])}
        return data

    def get_dev_id(self) -> int:
        return self.dev_id

    def get_fid(self) -> int:
        return self.fid

    def get_path(self) -> AnyUrl:
        return self.path

    def get_raw_path(self) -> str:
        return self.raw_path
