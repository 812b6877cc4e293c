from datetime import datetime

from pydantic import BaseModel, Field

from frontdesk_db.schema import INT32_MAX, INT32_MIN


# ======== Schemas ========
# Every field is required; unknown keys in a payload are ignored.
class CustomerIn(BaseModel):
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)
    email: str = Field(min_length=1)
    mobile: str = Field(min_length=1)
    checkinDate: datetime
    checkoutDate: datetime
    roomNumber: str = Field(min_length=1)
    roomType: str = Field(min_length=1)
    checkinTime: str = Field(min_length=1)
    checkoutTime: str = Field(min_length=1)
    mode: str = Field(min_length=1, description="Check-in method, e.g. walk-in or online")
    idType: str = Field(min_length=1)
    idValidationStatus: str = Field(min_length=1)
    checkinStatus: str = Field(min_length=1)
    roomAlloted: str = Field(min_length=1)
    omsCheckin: datetime
    omsCheckout: datetime
    idNumber: str = Field(min_length=1)
    totalGuests: int = Field(ge=INT32_MIN, le=INT32_MAX)


class StaffIn(BaseModel):
    firstName: str = Field(min_length=1)
    lastName: str = Field(min_length=1)
    email: str = Field(min_length=1)
    contact: str = Field(min_length=1)
    age: int = Field(ge=INT32_MIN, le=INT32_MAX)
    # stored as received
    password: str = Field(min_length=1)
    staffAccess: str = Field(min_length=1, description="Role/permission label")
    staffProgress: str = Field(min_length=1)
    idType: str = Field(min_length=1)
    idNumber: str = Field(min_length=1)
