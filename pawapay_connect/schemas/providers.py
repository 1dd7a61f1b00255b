from typing import Union

from pydantic import BaseModel, ConfigDict

from ..enums import Country, Provider
from .common import FailureReason


class PredictProviderSuccess(BaseModel):
    model_config = ConfigDict(frozen=True)

    country: Country
    provider: Provider
    phoneNumber: str

    @property
    def is_success(self) -> bool:
        return True


class PredictProviderFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    failureReason: FailureReason

    @property
    def is_success(self) -> bool:
        return False


PredictProviderResult = Union[PredictProviderSuccess, PredictProviderFailure]


class PredictProviderRequest(BaseModel):
    phoneNumber: str
