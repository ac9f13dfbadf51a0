"""Congress.gov API (member エンドポイント) のレスポンス型定義.

フィールド欠落はゼロ値で補い、型の不一致はバリデーションエラーとする。
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiTerm(BaseModel):
    """terms.item の個別任期."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    chamber: str = ""
    start_year: int = Field(default=0, alias="startYear")
    end_year: int | None = Field(default=None, alias="endYear")


class ApiTerms(BaseModel):
    """terms オブジェクト."""

    model_config = ConfigDict(frozen=True)

    item: list[ApiTerm] = Field(default_factory=list)


class ApiMember(BaseModel):
    """member エンドポイントの個別レコード."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    bioguide_id: str = Field(default="", alias="bioguideId")
    name: str = ""
    terms: ApiTerms = Field(default_factory=ApiTerms)
    # 州コードではなく州名（"New York" 等）
    state: str = ""
    # 0 は上院議員または全州選挙区
    district: int = 0
    party_name: str = Field(default="", alias="partyName")

    @field_validator("district", mode="before")
    @classmethod
    def _null_district(cls, v: object) -> object:
        # 上院議員は district が null で返ってくる
        return 0 if v is None else v

    @field_validator("terms", mode="before")
    @classmethod
    def _null_terms(cls, v: object) -> object:
        return {} if v is None else v

    @field_validator("name", "state", "party_name", "bioguide_id", mode="before")
    @classmethod
    def _null_str(cls, v: object) -> object:
        return "" if v is None else v
