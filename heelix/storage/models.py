from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    # A API devolve chaves em PascalCase; campos desconhecidos são preservados
    model_config = ConfigDict(populate_by_name=True, extra="allow")


class Entity(_ApiModel):
    id: Optional[int] = Field(default=None, alias="Id")
    name: Optional[str] = Field(default=None, alias="Name")


class NewsDocument(_ApiModel):
    id: Optional[int] = Field(default=None, alias="Id")
    headline: Optional[str] = Field(default=None, alias="Headline")
    insert_date: Optional[Union[int, str]] = Field(default=None, alias="InsertDate")
    source: Optional[str] = Field(default=None, alias="Source")
    url: Optional[str] = Field(default=None, alias="Url")


class NewsArticle(_ApiModel):
    """Uma entrada de `LatestNews`: o documento e as entidades anotadas."""

    document: NewsDocument = Field(alias="Document")
    persons: Optional[List[Entity]] = Field(default=None, alias="Persons")
    orgs: Optional[List[Entity]] = Field(default=None, alias="Orgs")
    places: Optional[List[Entity]] = Field(default=None, alias="Places")
