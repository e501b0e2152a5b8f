from pydantic import BaseModel, ConfigDict, Field

class Account(BaseModel):
    """Persisted account record; JSON field names match the stored format."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="ID", min_length=1)
    owner: str = Field(..., alias="Owner")
    balance: float = Field(..., alias="Balance", allow_inf_nan=False)

class AccountCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="ID", description="Caller-chosen unique account id")
    owner: str = Field(..., alias="Owner", description="Display name of the account holder")
    balance: float = Field(default=0.0, alias="Balance", allow_inf_nan=False)

class AccountUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    owner: str = Field(..., alias="Owner")
    balance: float = Field(..., alias="Balance", allow_inf_nan=False)

class ExistsResponse(BaseModel):
    exists: bool

class TransferRequest(BaseModel):
    source_account_id: str
    dest_account_id: str
    amount: float

class TransferResponse(BaseModel):
    source: Account
    dest: Account
