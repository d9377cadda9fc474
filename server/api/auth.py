# server/api/auth.py

from pydantic import BaseModel, ConfigDict, Field
from fastapi import APIRouter, HTTPException, Response, status, Depends
from sqlalchemy.orm import Session
from database import get_db
from core.accounts import sign_up, log_in
from core.errors import EmptyUsername, InvalidCredentials, StoreError, UsernameTaken
from core.store import CredentialStore, SqlCredentialStore, UserRecord


router = APIRouter()


class UserPayload(BaseModel):
    """Request body of /signup and /login. Missing fields default to empty."""
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(default="", alias="name")
    password: str = ""

    def to_record(self) -> UserRecord:
        return UserRecord(username=self.username, password=self.password)


def get_store(db: Session = Depends(get_db)) -> CredentialStore:
    return SqlCredentialStore(db)


@router.post("/signup")
def signup(user: UserPayload, store: CredentialStore = Depends(get_store)):
    try:
        sign_up(store, user.to_record())
    except (EmptyUsername, UsernameTaken) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StoreError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="There was an error querying the database"
        )
    return {"message": "Sign-up successful"}


@router.api_route("/login", methods=["GET", "POST"])
def login(user: UserPayload, store: CredentialStore = Depends(get_store)):
    try:
        log_in(store, user.to_record())
    except InvalidCredentials as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    return Response(status_code=status.HTTP_200_OK)
