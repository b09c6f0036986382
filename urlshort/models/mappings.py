# urlshort/models/mappings.py

from pydantic import BaseModel, ConfigDict, StrictStr


class PathToUrl(BaseModel):
    path: StrictStr
    url: StrictStr

    model_config = ConfigDict(frozen=True, extra="ignore")


class Redirect(BaseModel):
    url: str
    status_code: int = 302

    model_config = ConfigDict(frozen=True)


class StaticResponse(BaseModel):
    body: str
    status_code: int = 200

    model_config = ConfigDict(frozen=True)
