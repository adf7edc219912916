"""Advisory information requests to /bsa.aspx.

See official docs at https://api.bart.gov/docs/bsa/.
"""

from typing import Any

from pydantic import Field, model_validator

from .api import APIRequest, BaseAPI
from .models import BartModel, ResponseMetaData
from .scalars import CData, IntStr, XmlList


def init_advisories_request(cmd: str) -> APIRequest:
    return APIRequest(path="/bsa.aspx", cmd=cmd)


class Advisory(BartModel):
    """A service or elevator advisory."""

    id: str = Field("", alias="@id")
    station: str = ""
    type: str = ""
    description: CData = ""
    sms_text: CData = ""
    posted: str = ""
    expires: str = ""


class BSARoot(ResponseMetaData):
    data: XmlList[Advisory] = Field(default_factory=list, alias="bsa")


class AdvisoriesBSAResponse(BartModel):
    """Shape of a bsa response."""

    root: BSARoot = Field(default_factory=BSARoot)


class ElevatorRoot(ResponseMetaData):
    data: XmlList[Advisory] = Field(default_factory=list, alias="bsa")


class AdvisoriesElevatorResponse(BartModel):
    """Shape of an elev response."""

    root: ElevatorRoot = Field(default_factory=ElevatorRoot)


class TrainCountRoot(ResponseMetaData):
    data: IntStr = Field(0, alias="traincount")

    @model_validator(mode="before")
    @classmethod
    def _lift_nested_count(cls, data: Any) -> Any:
        # The count is usually a sibling of uri, but may be nested in "data".
        if not isinstance(data, dict):
            return data
        if any(isinstance(key, str) and key.lower() == "traincount" for key in data):
            return data
        nested = data.get("data")
        if isinstance(nested, dict):
            for key, value in nested.items():
                if isinstance(key, str) and key.lower() == "traincount":
                    return {**data, "traincount": value}
        return data


class AdvisoriesTrainCountResponse(BartModel):
    """Shape of a count response."""

    root: TrainCountRoot = Field(default_factory=TrainCountRoot)

    @property
    def count(self) -> int:
        return self.root.data


class AdvisoriesAPI(BaseAPI):
    """Namespace for advisory information requests."""

    def request_bsa(self) -> AdvisoriesBSAResponse:
        """Request current advisories. See https://api.bart.gov/docs/bsa/bsa.aspx."""
        return self._request(init_advisories_request("bsa"), AdvisoriesBSAResponse)

    def request_elevator(self) -> AdvisoriesElevatorResponse:
        """Request current elevator status. See https://api.bart.gov/docs/bsa/elev.aspx."""
        return self._request(init_advisories_request("elev"), AdvisoriesElevatorResponse)

    def request_train_count(self) -> AdvisoriesTrainCountResponse:
        """
        Request the number of trains currently active in the system.

        See https://api.bart.gov/docs/bsa/count.aspx.
        """
        return self._request(init_advisories_request("count"), AdvisoriesTrainCountResponse)


__all__ = [
    "AdvisoriesAPI",
    "Advisory",
    "AdvisoriesBSAResponse",
    "AdvisoriesElevatorResponse",
    "AdvisoriesTrainCountResponse",
]
