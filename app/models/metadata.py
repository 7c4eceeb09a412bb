from pydantic import BaseModel, ConfigDict, Field


class PageMetadata(BaseModel):
    """Metadata extracted from one rendered page.

    String fields are already whitespace-normalised. ``status`` falls back to
    200 when the browser reported no navigation response.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = ""
    meta_description: str = Field(default="", alias="metaDescription")
    h1: str = ""
    status: int = 200
