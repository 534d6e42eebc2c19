"""
Pydantic schemas for the ValidaCurp client
"""
from pydantic import BaseModel, Field
from typing import Optional, List, Any, Dict, Tuple


class PersonalData(BaseModel):
    """
    Personal data used to calculate a CURP.

    Every field is required by the remote service, but they are declared
    optional here so the client can report the first missing one by name
    (see ValidaCurp.calculate). Values are not validated or converted; they
    reach the request exactly as given.
    """
    names: Optional[Any] = Field(None, description="First name(s)")
    last_name: Optional[Any] = Field(None, alias="lastName", description="Apellido paterno")
    second_last_name: Optional[Any] = Field(None, alias="secondLastName", description="Apellido materno")
    birth_day: Optional[Any] = Field(None, alias="birthDay", description="Day of birth (DD)")
    birth_month: Optional[Any] = Field(None, alias="birthMonth", description="Month of birth (MM)")
    birth_year: Optional[Any] = Field(None, alias="birthYear", description="Year of birth (YYYY)")
    gender: Optional[Any] = Field(None, description="Gender (H or M)")
    entity: Optional[Any] = Field(None, description="Birth state code (e.g. 15)")

    class Config:
        populate_by_name = True
        extra = "allow"

    def required_values(self) -> List[Tuple[str, Any]]:
        """Required fields in the order they are checked, keyed by their wire name."""
        return [
            ("names", self.names),
            ("lastName", self.last_name),
            ("secondLastName", self.second_last_name),
            ("birthDay", self.birth_day),
            ("birthMonth", self.birth_month),
            ("birthYear", self.birth_year),
            ("gender", self.gender),
            ("entity", self.entity),
        ]


class OperationRequest(BaseModel):
    """A single remote call before it is shaped for an API version"""
    method_name: str
    curp: Optional[str] = None
    extra_fields: Optional[Dict[str, Any]] = None


class PreparedRequest(BaseModel):
    """HTTP request ready to hand to the transport"""
    http_method: str
    url: str
    body: Optional[Dict[str, Any]] = None
    headers: Dict[str, str] = {}
