"""
Quora Backend — User & Admin Request/Response Schemas
=======================================================

What:  Pydantic models for the /user, /userprofile and /admin endpoints.
How:   Field aliases keep the camelCase wire names clients already use
       (userName, emailAddress, aboutMe...) while the Python side stays
       snake_case. Credentials never appear in a response model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SignupUserRequest(BaseModel):
    """Body of POST /user/signup."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(alias="firstName", min_length=1, max_length=30)
    last_name: str = Field(alias="lastName", min_length=1, max_length=30)
    user_name: str = Field(alias="userName", min_length=1, max_length=30)
    email_address: str = Field(alias="emailAddress", min_length=3, max_length=50)
    password: str = Field(min_length=1, max_length=255)
    country: Optional[str] = Field(default=None, max_length=30)
    about_me: Optional[str] = Field(default=None, alias="aboutMe", max_length=50)
    dob: Optional[str] = Field(default=None, max_length=30)
    contact_number: Optional[str] = Field(default=None, alias="contactNumber", max_length=30)


class SignupUserResponse(BaseModel):
    id: str = Field(description="Public id of the new user")
    status: str = Field(default="USER SUCCESSFULLY REGISTERED")


class SigninResponse(BaseModel):
    id: str = Field(description="Public id of the signed-in user")
    message: str = Field(default="SIGNED IN SUCCESSFULLY")


class SignoutResponse(BaseModel):
    id: str = Field(description="Public id of the user whose session was closed")
    message: str = Field(default="SIGNED OUT SUCCESSFULLY")


class UserDetailsResponse(BaseModel):
    """Profile returned by GET /userprofile/{userId}."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    user_name: str = Field(serialization_alias="userName")
    email_address: str = Field(serialization_alias="emailAddress")
    country: Optional[str] = None
    about_me: Optional[str] = Field(default=None, serialization_alias="aboutMe")
    dob: Optional[str] = None
    contact_number: Optional[str] = Field(default=None, serialization_alias="contactNumber")


class UserDeleteResponse(BaseModel):
    id: str = Field(description="Public id of the deleted user")
    status: str = Field(default="USER SUCCESSFULLY DELETED")
