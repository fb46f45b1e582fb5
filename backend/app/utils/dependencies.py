from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from typing import Optional
from app.core.permissions import Identity
from app.core.security import decode_access_token

oauth2_scheme_optional = OAuth2PasswordBearer(tokenUrl="/token", auto_error=False)

# JWT 토큰에서 현재 사용자 정보 가져오기 (토큰이 없거나 유효하지 않으면 None)
def get_optional_identity(token: Optional[str] = Depends(oauth2_scheme_optional)) -> Optional[Identity]:
    if not token:
        return None
    return decode_access_token(token)
