# model/listing.py
from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class NamespaceRecord(BaseModel):
    # Unknown upstream fields (created_on, ...) are passed through untouched
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str | None = None
    class_name: str | None = Field(default=None, alias="class")
    script: str | None = None
    use_sqlite: bool | None = Field(
        default=None, validation_alias=AliasChoices("use_sqlite", "useSqlite")
    )


class ObjectRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    hasStoredData: bool = False


class ResultInfo(BaseModel):
    page: int | None = None
    total_pages: int | None = None


class NamespacePage(BaseModel):
    result: list[NamespaceRecord]
    result_info: ResultInfo | None = None

    @property
    def is_last(self) -> bool:
        """No pagination metadata counts as the final page."""
        info = self.result_info
        if info is None or info.page is None or info.total_pages is None:
            return True
        return info.page >= info.total_pages


class ObjectListing(BaseModel):
    result: list[ObjectRecord] | None = None
